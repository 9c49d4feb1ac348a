from __future__ import annotations


class BotAPIGenError(Exception):
    pass


class DocumentLoadError(BotAPIGenError):
    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Cannot load document {path}: {message}")


class CatalogueError(BotAPIGenError):
    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Invalid catalogue {path}: {message}")


class DownloadError(BotAPIGenError):
    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message
        super().__init__(f"Download of {url} failed: {message}")


class ExtractionFailure(BotAPIGenError):
    """Built by the assembler to describe one entity's failure in its diagnostic; never raised."""

    def __init__(self, entity: str, error: BaseException) -> None:
        self.entity = entity
        self.error = error
        super().__init__(f"Extraction of {entity} failed: {error!r}")
