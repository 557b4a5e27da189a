import logging
import os

from main import app

logger = logging.getLogger(__name__)


def main():
    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', '8080'))
    debug = os.environ.get('DEBUG', '').lower() in ('1', 'true', 'yes')

    logger.info('Battlesnake active at http://%s:%s', host, port)
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
