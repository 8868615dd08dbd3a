#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app calctools.wsgi run --port 5000 --debug

from calctools.app import create_app
from calctools.config import get_settings

settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    app.run(port=settings.PORT, debug=True)
