from __future__ import annotations

import importlib

from . import create_app
from .config import get_settings_module
from .core.constants import DEFAULT_API_PORT


def main() -> None:
    app = create_app()
    # create_app loads .env first, so settings pick up its values here.
    settings = importlib.import_module(get_settings_module())
    app.run(
        host=getattr(settings, "API_HOST", "127.0.0.1"),
        port=int(getattr(settings, "API_PORT", DEFAULT_API_PORT)),
    )


if __name__ == "__main__":
    main()
