"""Backend configuration.

Lets an application pick its syscall backend from plain data (a parsed
YAML or JSON document, environment-driven settings, ...) rather than by
constructing backend objects in code.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

from typed_xattrs.backends import Backend, InMemoryBackend, SystemBackend


class BackendConfigSchema(BaseModel):
    """Backend configuration.

    Attributes:
        type: Backend type (``"system"`` or ``"memory"``)
        follow_symlinks: Whether the system backend resolves symbolic
                         links before touching their attributes
    """

    type: Literal["system", "memory"] = "system"
    follow_symlinks: bool = True


def create_backend(config: BackendConfigSchema | dict[str, Any] | None = None) -> Backend:
    """Create a backend from configuration.

    Args:
        config: Backend configuration, or a mapping validated into one.
                ``None`` selects the defaults.

    Returns:
        Backend instance
    """
    if config is None:
        config = BackendConfigSchema()
    elif not isinstance(config, BackendConfigSchema):
        config = BackendConfigSchema.model_validate(config)

    if config.type == "memory":
        return InMemoryBackend()
    return SystemBackend(follow_symlinks=config.follow_symlinks)
