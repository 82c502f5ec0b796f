"""Flask web server for the hello site.

Run:
  pip install .
  hello serve

The app renders the homepage from `views/index.html`, answers two plain-text
routes, serves files from `public/` at the site root and returns a plain
`404!` for anything else.
"""
from flask import Blueprint, Flask, Response, current_app, render_template, request
from pathlib import Path
import os

PACKAGE_DIR = Path(__file__).parent

MESSAGE = "Hey everyone! This is my webpage!"
ABOUT_TEXT = "Welcome to my about page!"
WEATHER_TEXT = "The current weather is NICE."
NOT_FOUND_TEXT = "404!"

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 3000

bp = Blueprint("site", __name__)


def get_host() -> str:
    return os.environ.get('HELLO_HOST', DEFAULT_HOST)


def get_port() -> int:
    """Return the bind port from HELLO_PORT, or 3000 when it is unset."""
    raw = os.environ.get('HELLO_PORT')
    if raw is None or raw == '':
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"HELLO_PORT must be an integer, got {raw!r}") from None


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype='text/plain')


@bp.route('/')
def index():
    return render_template('index.html', message=MESSAGE)


@bp.route('/about', strict_slashes=False)
@bp.route('/about/', strict_slashes=False)
def about():
    return _text(ABOUT_TEXT)


@bp.route('/weather', strict_slashes=False)
@bp.route('/weather/', strict_slashes=False)
def weather():
    return _text(WEATHER_TEXT)


@bp.app_errorhandler(404)
@bp.app_errorhandler(405)
def not_found(error):
    # a known path with the wrong method is treated as unmatched too
    current_app.logger.debug("No route for %s %s (%s)", request.method, request.path, error.code)
    return _text(NOT_FOUND_TEXT, 404)


def create_app(public_dir: Path | str | None = None, views_dir: Path | str | None = None) -> Flask:
    """Build the Flask app.

    Directories default to HELLO_PUBLIC_DIR / HELLO_VIEWS_DIR, then to
    the `public/` and `views/` folders shipped inside this package.
    """
    if public_dir is None:
        public_dir = os.environ.get('HELLO_PUBLIC_DIR') or PACKAGE_DIR / 'public'
    if views_dir is None:
        views_dir = os.environ.get('HELLO_VIEWS_DIR') or PACKAGE_DIR / 'views'

    # static files live at the site root, e.g. /style.css -> public/style.css
    app = Flask(
        __name__,
        static_folder=str(Path(public_dir).resolve()),
        static_url_path='',
        template_folder=str(Path(views_dir).resolve()),
    )
    app.register_blueprint(bp)
    return app


app = create_app()


if __name__ == '__main__':
    app.run(host=get_host(), port=get_port())
