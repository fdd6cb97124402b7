"""Render request URLs from method names and page paths."""

from telegraph_client import config


def resolve_endpoint(method: str, path: str | None = None, *, base_url: str | None = None) -> str:
    """Return the URL for an API method.

    Account-scoped methods (``createPage``, ``getPageList``...) take only the
    method name; path-scoped methods (``editPage``, ``getPage``, ``getViews``)
    also take the page path.
    """
    base = (base_url if base_url is not None else config.API_BASE_URL).rstrip("/")
    if path is None:
        return config.ACCOUNT_ENDPOINT.format(base=base, method=method)
    if not path:
        msg = f"{method}: page path must not be empty"
        raise ValueError(msg)
    return config.PATH_ENDPOINT.format(base=base, method=method, path=path)
