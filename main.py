"""
main.py - Graph Animator Flask App
==================================
A thin web front end over the same pipeline the CLI uses.

Routes:
  GET  /               - form: pick an algorithm, paste a graph config
  GET  /api/algorithms - registry cards as JSON
  POST /api/run        - {algorithm, config} → run metrics as JSON
  POST /api/render     - {algorithm, config} → animated GIF

Nothing is kept between requests: every call parses the config text,
builds a fresh graph and runs the algorithm to completion.
"""

import io
import logging
from dataclasses import asdict

from flask import Flask, render_template_string, request, jsonify, send_file

from algorithms import create_algorithm, get_algorithm, list_algorithms
from engine import Recorder, Visualizer
from graph import ConfigError
from ui import GIFRenderer

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024     # config text, not uploads
app.config["MAX_FRAME_PIXELS"]   = 4_000_000       # per frame, every frame is held in memory


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
class ApiError(Exception):
    pass


def parse_request():
    """Return (AlgoInfo, config) for the JSON body or raise ApiError."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ApiError("Request body must be a JSON object")
    key  = data.get("algorithm", "")
    text = data.get("config", "")

    if not isinstance(key, str):
        raise ApiError(f"Unknown algorithm: {key!r}")
    info = get_algorithm(key)
    if info is None:
        raise ApiError(f"Unknown algorithm: {key!r}")
    if not isinstance(text, str) or not text.strip():
        raise ApiError("Missing graph config text")

    try:
        config = info.load_config(text)
    except ConfigError as e:
        raise ApiError(f"Invalid config: {e}") from e

    pixels = config.frame_width * config.frame_height
    if pixels > app.config["MAX_FRAME_PIXELS"]:
        raise ApiError(
            f"Frame too large: {config.frame_width}x{config.frame_height} pixels "
            f"(limit {app.config['MAX_FRAME_PIXELS']} per frame)"
        )
    return info, config


@app.errorhandler(ApiError)
def handle_bad_request(e):
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    return render_template_string(INDEX_TEMPLATE, algorithms=list_algorithms())


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([
        {
            "key":              a.key,
            "label":            a.label,
            "config_kind":      a.config_kind,
            "tags":             a.tags,
            "complexity_time":  a.complexity_time,
            "complexity_space": a.complexity_space,
            "description":      a.description,
            "pseudocode":       a.pseudocode,
        }
        for a in list_algorithms()
    ])


# ---------------------------------------------------------------------------
# API: Run / Render
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    info, config = parse_request()

    rec = Recorder()
    rec.start(info.key, config)
    metrics = rec.run_to_completion()
    return jsonify(asdict(metrics))


@app.route("/api/render", methods=["POST"])
def api_render():
    info, config = parse_request()

    buffer   = io.BytesIO()
    renderer = GIFRenderer(buffer, config.frame_delay, config.frame_width, config.frame_height)
    frames   = Visualizer(create_algorithm(info.key, config), renderer).visualize()
    logger.info("rendered %s: %d frame(s), %d bytes", info.key, frames, buffer.tell())

    buffer.seek(0)
    return send_file(buffer, mimetype="image/gif", download_name=f"{info.key.lower()}.gif")


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Graph Animator</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 420px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    select, textarea {
      width: 100%;
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 8px;
      font-family: 'Courier New', monospace;
      font-size: 12px;
    }

    textarea { height: 320px; resize: vertical; }

    .button-row { display: flex; gap: 8px; margin-top: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }

    .code-line {
      font-family: 'Courier New', monospace;
      font-size: 12px;
      line-height: 1.6;
      white-space: pre;
      color: var(--text-secondary);
    }

    /* Main area */
    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 16px;
    }

    #metrics { font-family: 'Courier New', monospace; font-size: 13px; }
    #error   { color: var(--accent-rose); }
  </style>
</head>
<body>
  <div id="sidebar">
    <div class="panel">
      <h3>Algorithm</h3>
      <select id="algo-selector">
        {% for a in algorithms %}
        <option value="{{ a.key }}">{{ a.label }} ({{ a.key }})</option>
        {% endfor %}
      </select>
    </div>

    <div class="panel">
      <h3>Graph Config</h3>
      <textarea id="config-text" placeholder="[GRID DATA]&#10;3x1&#10;0&#10;2&#10;&#10;[NODES]&#10;0 0&#10;1 0&#10;2 0&#10;&#10;[EDGES]&#10;0 1&#10;1 2"></textarea>
      <div class="button-row">
        <button id="btn-run">Run</button>
        <button id="btn-render">Render GIF</button>
      </div>
    </div>

    {% for a in algorithms %}
    <div class="panel">
      <h3>{{ a.label }}</h3>
      {% for line in a.pseudocode %}
      <div class="code-line">{{ line }}</div>
      {% endfor %}
    </div>
    {% endfor %}
  </div>

  <div id="main">
    <div id="error"></div>
    <img id="animation" alt="">
    <pre id="metrics"></pre>
  </div>

  <script>
    function body() {
      return JSON.stringify({
        algorithm: document.getElementById('algo-selector').value,
        config: document.getElementById('config-text').value,
      });
    }

    async function post(url) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: body(),
      });
      document.getElementById('error').textContent = '';
      if (!res.ok) {
        const data = await res.json();
        document.getElementById('error').textContent = data.error;
        return null;
      }
      return res;
    }

    document.getElementById('btn-run').addEventListener('click', async () => {
      const res = await post('/api/run');
      if (res) {
        const data = await res.json();
        document.getElementById('metrics').textContent = JSON.stringify(data, null, 2);
      }
    });

    document.getElementById('btn-render').addEventListener('click', async () => {
      const res = await post('/api/render');
      if (res) {
        const blob = await res.blob();
        document.getElementById('animation').src = URL.createObjectURL(blob);
      }
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  Graph Animator")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
