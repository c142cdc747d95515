#!/usr/bin/env python3
"""
Simple Flask application for the CI/CD pipeline demo.
Serves a single solid blue PNG so each rollout can be checked with one request.
"""

from flask import Flask, Response
from PIL import Image
import io
import logging
import os

WIDTH = 100
HEIGHT = 100
BLUE = (0, 0, 255, 255)

app = Flask(__name__)
logger = logging.getLogger(__name__)


def blue_image():
    """Return a new WIDTH x HEIGHT RGBA image filled with opaque blue."""
    return Image.new('RGBA', (WIDTH, HEIGHT), BLUE)


def encode_png(image):
    buf = io.BytesIO()
    image.save(buf, format='PNG')
    return buf.getvalue()


@app.route('/blue')
def blue():
    """Blue image endpoint - same bytes for every request."""
    body = encode_png(blue_image())
    logger.debug('serving %d byte png', len(body))
    return Response(body, status=200, mimetype='image/png')


def get_port():
    return int(os.environ.get('PORT', 8080))


def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    port = get_port()
    logger.info('listening on 0.0.0.0:%d', port)
    app.run(host='0.0.0.0', port=port)


if __name__ == '__main__':
    main()
