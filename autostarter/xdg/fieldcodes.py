"""Desktop entry field code handling

From the Desktop Entry Specification:

    A number of special field codes have been defined which will be expanded by the file manager or program launcher
    when encountered in the command line. Field codes consist of the percentage character ("%") followed by an alpha
    character.

    If the application should not open any file the %f, %u, %F and %U field codes must be removed from the command
    line and ignored.

An autostarted application never gets files, URLs or an icon argument, so every field code is simply removed.

"""


def sanitize(rawCommand):
    """Strip all field codes from `rawCommand`, giving a command line that can be passed straight to a shell.

    Each "%" is dropped together with the character after it, whatever that character is; unknown codes aren't
    validated, and a "%" at the very end of the string is dropped on its own. Whitespace around removed codes is kept
    as-is.

        >>> sanitize("firefox %u --new-window")
        'firefox  --new-window'
        >>> sanitize("cmd %")
        'cmd '

    This has to run before the shell sees the command. A literal "%" (for instance in a `date +%H` argument) is
    removed along with the next character; such commands need to be wrapped in a script.

    """
    result = []
    chars = iter(rawCommand)

    for char in chars:
        if char == '%':
            # Skip the field code letter too, if there is one.
            next(chars, None)
            continue

        result.append(char)

    return ''.join(result)
