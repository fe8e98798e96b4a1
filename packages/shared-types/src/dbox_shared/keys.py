"""
Preview object key and naming conventions.

Single source of truth for where processors write their output and how the
download name is derived. Every processor kind uses only these functions.

Preview key format:     {inode_s3_key}/preview.{ext}
Preview file name:      preview.{ext}
Display file name:      {input_file_name}.{ext}
"""

_PREVIEW_BASENAME = "preview"


def build_preview_file_name(ext: str) -> str:
    """Return the preview file name reported in COMPLETE events (e.g. preview.html)."""
    return f"{_PREVIEW_BASENAME}.{ext}"


def build_preview_key(inode_s3_key: str, ext: str) -> str:
    """
    Build the output object key for a preview.

    The key depends only on the source key and extension, so re-running a job
    overwrites the same object.
    """
    return f"{inode_s3_key}/{build_preview_file_name(ext)}"


def build_display_file_name(input_file_name: str, ext: str) -> str:
    """Original file name with the preview extension appended (report.csv -> report.csv.html)."""
    return f"{input_file_name}.{ext}"

