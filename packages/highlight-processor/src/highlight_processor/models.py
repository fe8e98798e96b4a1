"""Job descriptor for highlight requests."""

from dbox_shared import JobDescriptor
from pydantic import Field

from .languages import AUTO_LANGUAGE


class HighlightJobDescriptor(JobDescriptor):
    """JobDescriptor plus the requested language (highlight.js name, or "auto")."""

    code_lang: str = Field(AUTO_LANGUAGE, alias="codeLang")
