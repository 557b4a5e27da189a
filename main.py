import logging
import os

from battlesnake import create_battlesnake_server


def configure_logging():
    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    # Requests are logged by the app itself
    logging.getLogger('werkzeug').setLevel(logging.ERROR)


configure_logging()

# Create Flask app and snake logic
app = create_battlesnake_server()
