"""Turning a full-diff file body back into plain file content."""

NO_NEWLINE_MARKER = '\\ No newline at end of file'


def normalize_content(body: str) -> str:
    """
    Strip diff markup from the body of a newly added file.

    Removes the '+' that prefixes every added line.  If the file lacked a final
    newline, git ends the body with a marker line; that marker and the empty
    line after it are dropped so the content does not gain a spurious last line.

    Args:
        body: File body as recovered from a full diff

    Returns:
        The file content
    """
    lines = [line[1:] if line.startswith('+') else line for line in body.split('\n')]

    if len(lines) >= 2 and lines[-2] == NO_NEWLINE_MARKER:
        lines = lines[:-2]

    return '\n'.join(lines)
