"""SceneWatch - keeps the latest processed satellite scene on display."""

__version__ = "1.0.0"

try:
    from scenewatch.config import config
    __all__ = ["config", "__version__"]
except ImportError:
    # Config might not be available during installation
    __all__ = ["__version__"]
