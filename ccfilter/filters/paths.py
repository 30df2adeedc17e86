"""Resolution of source-file arguments against the invocation's cwd."""


def resolve_source_path(file: str, cwd: str) -> str:
    """
    Make a source-file argument absolute.

    Absolute arguments are returned unchanged; relative ones are joined to
    cwd with a single '/'. No further normalisation is applied, so '..'
    components and symlinks are kept as the compiler saw them.
    """
    if file.startswith("/"):
        return file
    return f"{cwd}/{file}"
