def join_url(root: str, path: str) -> str:
    """Append ``path`` to ``root`` with exactly one slash between them.

    >>> join_url("/api", "config/")
    '/api/config/'
    >>> join_url("/api/", "config/")
    '/api/config/'
    """
    return root + ("" if root.endswith("/") else "/") + path.lstrip("/")
