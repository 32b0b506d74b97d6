import pytest

SAMPLE_DOCUMENT = "# Heading\n\n## Subheading\n\n## Subheading with `code`\n"


@pytest.fixture()
def sample_document() -> str:
    """Provides a small document with one top-level and two nested headings."""
    return SAMPLE_DOCUMENT
