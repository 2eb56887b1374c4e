"""Flask app showing the latest published scene on a map."""
import logging

from flask import Flask, jsonify, render_template_string

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Latest Imagery</title>
    <meta http-equiv="refresh" content="{{ page_reload_interval }}">
    <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css">
    <script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
    <style>
        html, body { margin: 0; height: 100%; }
        #map { width: 100%; height: 100%; }
        .pending { font-family: sans-serif; padding: 2em; color: #555; }
    </style>
</head>
<body>
{% if tile_url %}
    <div id="map"></div>
    <script>
        var map = L.map('map').setView({{ center | tojson }}, 11);
        L.tileLayer({{ tile_url | tojson }}, { maxZoom: 18 }).addTo(map);
    </script>
{% else %}
    <div class="pending">No imagery is ready yet. This page reloads every {{ page_reload_interval }} seconds.</div>
{% endif %}
</body>
</html>
"""


def create_app(cache, center, page_reload_interval=3600, tile_url_template=""):
    """
    Build the display app.

    Args:
        cache: ResultCache read on every request
        center: (latitude, longitude) the map is centered on
        page_reload_interval: Seconds between automatic page reloads
        tile_url_template: Tile URL with a {map_id} placeholder

    Returns:
        Flask application
    """
    app = Flask(__name__)
    app.config["RESULT_CACHE"] = cache

    @app.route("/")
    def index():
        """Render the map for the latest ready image."""
        map_id = cache.latest()
        logger.info("Page reload requested, latest image is %s", map_id)

        tile_url = None
        if map_id and tile_url_template:
            tile_url = tile_url_template.replace("{map_id}", map_id)

        return render_template_string(
            PAGE_TEMPLATE,
            tile_url=tile_url,
            center=list(center),
            page_reload_interval=page_reload_interval,
        )

    @app.route("/latest")
    def latest():
        """Latest ready result as JSON."""
        entry = cache.snapshot()
        if entry is None:
            return jsonify({"map_id": None, "scene_id": None, "generation": None, "updated_at": None})
        return jsonify(entry.to_dict())

    return app
