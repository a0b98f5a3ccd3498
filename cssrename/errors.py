class CssRenameError(Exception):
    pass


class ConfigError(CssRenameError):
    pass


class ChangeListFetchError(CssRenameError):
    url: str
    status_code: int | None

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch changes from {url}: {message}")


class FileRewriteError(CssRenameError):
    path: str

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to rewrite {path}: {message}")


class SummaryWriteError(CssRenameError):
    path: str

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to update summary {path}: {message}")
