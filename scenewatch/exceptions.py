"""Error types raised by SceneWatch components.

Provider errors end the current search cycle or polling chain; they are
logged where that happens and never take the process down.
"""


class SceneWatchError(Exception):
    """Base exception for SceneWatch errors."""

    def __init__(self, message="", scene_id=None):
        self.message = message
        self.scene_id = scene_id
        super().__init__(message)


class TransportError(SceneWatchError):
    """Network failure or non-success HTTP response from the provider."""

    def __init__(self, message="", scene_id=None, status_code=None):
        self.status_code = status_code
        super().__init__(message, scene_id=scene_id)


class NoMatchError(SceneWatchError):
    """A scene search produced no usable result."""


class UnknownStatusError(SceneWatchError):
    """The provider reported a pipeline state the tracker does not recognize."""


class ConfigError(SceneWatchError):
    """Required configuration is missing or invalid."""

    def __init__(self, message="", problems=None):
        self.problems = list(problems or [])
        super().__init__(message)
