#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Skeleton - Flask Preview Application

Renders the skeleton of a QR symbol (quiet zone, finder and timing patterns)
for a chosen version. Everything is rendered in memory.
"""

import logging
from flask import Flask, render_template_string, request, send_file, Response
from io import BytesIO
from typing import Tuple
from qr_skeleton import Grid, SkeletonError, MIN_VERSION, MAX_VERSION
from qr_skeleton.renderer import (
    render_text,
    render_png_from_grid,
    render_colored_png_from_grid,
    render_colored_svg_from_grid,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_VERSION = 1
DEFAULT_SCALE = 10
MAX_SCALE = 40

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Skeleton Preview</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff}
    .card{width:320px;border:1px solid #ddd;padding:10px;border-radius:8px;background:#fff}
    img{display:block;margin:6px 0;border:1px solid #ccc;max-width:100%}
    .legend div{margin:6px 0}
    .sw{display:inline-block;width:18px;height:12px;border:1px solid #aaa;margin-right:8px}
    .metrics{font-size:12px;color:#333}
    .error{color:#b00;font-weight:600}
  </style>
</head>
<body>
  <h1>QR Skeleton Preview</h1>
  <form method="post">
    Version ({{min_version}}-{{max_version}}):
    <input type="number" name="version" min="{{min_version}}" max="{{max_version}}" value="{{version|e}}">
    <button type="submit">Build</button>
  </form>

  {% if error %}
    <p class="error">{{error}}</p>
  {% endif %}

  {% if qr %}
    <div class="card">
      <strong>v{{qr.version}}</strong> - {{qr.size}}x{{qr.size}} modules<br>
      <img src="data:image/png;base64,{{qr.img_b64}}" alt="Skeleton v{{qr.version}}">
      <div class="metrics">
        Quiet zone (border): {{qr.border}} modules<br>
        Dark modules: {{qr.dark_modules}} / {{qr.modules}}<br>
        Reserved modules: {{qr.reserved_modules}}<br>
        Free modules: {{qr.free_modules}}<br>
      </div>
      <a href="/export/png?version={{qr.version}}">PNG</a> |
      <a href="/export/svg?version={{qr.version}}">SVG</a> |
      <a href="/export/txt?version={{qr.version}}">Text</a>
    </div>
    <div class="legend">
      <div><span class="sw" style="background:rgb(128,0,128)"></span> Finder pattern</div>
      <div><span class="sw" style="background:rgb(230,230,230)"></span> Separator</div>
      <div><span class="sw" style="background:rgb(255,165,0)"></span> Timing pattern</div>
      <div><span class="sw" style="background:rgb(245,245,245)"></span> Quiet zone</div>
    </div>
  {% endif %}
</body>
</html>
"""


def _parse_version(raw):
    """Convert a request value to a version; non-integers are passed through for Grid.new to reject."""
    if raw is None or str(raw).strip() == "":
        return DEFAULT_VERSION
    try:
        return int(str(raw).strip())
    except ValueError:
        return raw


def _read_params(req) -> Tuple[int, int]:
    """Extract QR skeleton parameters from a Flask request."""
    version = _parse_version(req.values.get('version'))

    try:
        scale = int(req.values.get('scale') or DEFAULT_SCALE)
        if scale < 1 or scale > MAX_SCALE:
            logger.warning(f"Scale {scale} out of range, using {DEFAULT_SCALE}")
            scale = DEFAULT_SCALE
    except (ValueError, TypeError):
        scale = DEFAULT_SCALE

    return version, scale


def _build(version):
    logger.info(f"Building QR skeleton for version {version!r}")
    return Grid.new(version)


app = Flask(__name__)


@app.errorhandler(SkeletonError)
def handle_skeleton_error(ex):
    logger.warning(f"Rejected request: {ex}")
    return str(ex), 400


@app.route('/', methods=['GET', 'POST'])
def index():
    version = DEFAULT_VERSION
    qr_view = None
    error = None

    if request.method == 'POST':
        version = _parse_version(request.form.get('version'))
        try:
            grid = _build(version)
        except SkeletonError as ex:
            error = f"Could not build the skeleton: {ex}"
            logger.error(f"Skeleton build failed: {ex}")
            grid = None

        if grid is not None:
            b64, metrics = render_colored_png_from_grid(grid, scale=6)
            qr_view = dict(metrics, img_b64=b64)

    return render_template_string(
        TEMPLATE,
        version=version, min_version=MIN_VERSION, max_version=MAX_VERSION,
        qr=qr_view, error=error
    )


@app.route('/export/png', methods=['GET'])
def export_png_bw():
    version, scale = _read_params(request)
    grid = _build(version)
    buf = BytesIO(render_png_from_grid(grid, scale=scale))
    return send_file(buf, as_attachment=True,
                     download_name=f'qr_skeleton_v{grid.version}.png',
                     mimetype='image/png')


@app.route('/export/svg', methods=['GET'])
def export_svg_colored():
    version, scale = _read_params(request)
    grid = _build(version)
    svg_bytes = render_colored_svg_from_grid(grid, scale=scale)
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name=f'qr_skeleton_v{grid.version}.svg',
                     mimetype='image/svg+xml')


@app.route('/export/txt', methods=['GET'])
def export_txt():
    version, _ = _read_params(request)
    grid = _build(version)
    return Response(render_text(grid), mimetype='text/plain')


if __name__ == "__main__":
    app.run(debug=True)
