LOOKING_COMMAND = "/looking"


def should_show_looking_preview(text: str) -> bool:
    """Show the command preview while the user is still typing /looking.

    The preview appears for any non-empty, case-insensitive proper prefix of
    the command that starts with a slash, and disappears once the command is
    complete.
    """
    lowered = text.lower()
    return (
        len(text) > 0
        and text.startswith("/")
        and LOOKING_COMMAND.startswith(lowered)
        and lowered != LOOKING_COMMAND
    )
