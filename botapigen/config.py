from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_BASE_URL = "https://core.telegram.org/bots/api"


class GeneratorConfig(BaseModel):
    """Settings shared by the downloader, the extractor and the renderer.

    Usage::

        config = GeneratorConfig()                       # defaults
        config = GeneratorConfig(base_url="https://...") # explicit
        config = GeneratorConfig.from_env()              # BOTAPIGEN_* vars

    Attributes:
        base_url: Address of the reference page. Relative links in the
            documentation are resolved against it.
        content_selector: CSS selector of the container kept by ``download``.
        heading_tag: Tag that titles one entity section.
        boundary_tags: Tags that end a section.
        required_marker: Text of the *Required* column meaning "yes".
        optional_marker: Text that marks a field optional in its description.
        class_name: Name of the abstract class listing every method.
        timeout: HTTP read timeout for ``download``, in seconds.
        connect_timeout: HTTP connect timeout for ``download``, in seconds.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    content_selector: str = "#dev_page_content"
    heading_tag: str = "h4"
    boundary_tags: tuple[str, ...] = ("h3", "h4", "hr")
    required_marker: str = "Yes"
    optional_marker: str = "_Optional_"
    class_name: str = "AbstractApi"
    timeout: float = 30.0
    connect_timeout: float = 10.0

    @classmethod
    def from_env(cls, **overrides: object) -> GeneratorConfig:
        """Build a config from ``BOTAPIGEN_*`` variables.

        Keyword arguments that are not ``None`` win over the environment.
        """
        values: dict[str, object] = {}
        if url := os.environ.get("BOTAPIGEN_BASE_URL"):
            values["base_url"] = url
        if selector := os.environ.get("BOTAPIGEN_CONTENT_SELECTOR"):
            values["content_selector"] = selector
        if timeout := os.environ.get("BOTAPIGEN_TIMEOUT"):
            values["timeout"] = float(timeout)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
