"""Informational landing page."""
from functools import lru_cache

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from src.common.config import settings
from src.normalization import LIMITS

router = APIRouter(tags=["pages"])

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>BMI Calculator API</title>
  <meta name="description" content="Public BMI Calculator API with WHO categories, CORS enabled">
  <style>
    body {{ font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; margin: 0; color: #1f2937; }}
    .container {{ max-width: 960px; margin: 0 auto; padding: 0 1rem; }}
    header {{ background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 3rem 0; text-align: center; }}
    section {{ padding: 2rem 0; border-bottom: 1px solid #e9d5ff; }}
    pre {{ background: #1e1b4b; color: #f9fafb; padding: 1rem; border-radius: 0.5rem; overflow-x: auto; }}
    table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
    th, td {{ text-align: left; padding: 0.5rem; border-bottom: 1px solid #e9d5ff; }}
    code {{ background: #f3e8ff; padding: 0.1rem 0.3rem; border-radius: 0.25rem; }}
    .calculator {{ background: #faf5ff; padding: 1.5rem; border-radius: 0.75rem; max-width: 560px; }}
    .calculator input[type=number] {{ width: 100%; padding: 0.5rem; margin-bottom: 1rem; }}
    .hidden {{ display: none; }}
    .error {{ color: #ef4444; }}
    .disclaimer {{ background: #fef3c7; border: 1px solid #fbbf24; padding: 1rem; border-radius: 0.5rem; color: #92400e; }}
  </style>
</head>
<body>
  <header>
    <div class="container">
      <h1>Public BMI API: calculate BMI and get the WHO category</h1>
      <p>Open, CORS-enabled API for Body Mass Index calculations &middot; v{version}</p>
    </div>
  </header>

  <main class="container">
    <section id="quickstart">
      <h2>Quick Start</h2>
      <h3>GET request (metric)</h3>
      <pre>curl "/v1/bmi?weight_kg=70&amp;height_cm=175"</pre>
      <h3>POST request</h3>
      <pre>fetch('/v1/bmi', {{
  method: 'POST',
  headers: {{ 'Content-Type': 'application/json' }},
  body: JSON.stringify({{ units: 'metric', weight: 70, height: 175 }})
}}).then(res =&gt; res.json());</pre>
    </section>

    <section id="calculator">
      <h2>Calculator</h2>
      <form class="calculator" id="bmiForm">
        <label><input type="radio" name="units" value="metric" checked> Metric (kg, cm)</label>
        <label><input type="radio" name="units" value="imperial"> Imperial (lb, in)</label>
        <p><label for="weight">Weight</label><input type="number" id="weight" step="0.1" required></p>
        <p><label for="height">Height</label><input type="number" id="height" step="0.1" required></p>
        <button type="submit">Calculate BMI</button>
        <pre id="result" class="hidden"></pre>
        <p id="error" class="error hidden"></p>
      </form>
    </section>

    <section id="api-reference">
      <h2>API Reference</h2>
      <table>
        <thead><tr><th>Method</th><th>Path</th><th>Description</th></tr></thead>
        <tbody>
          <tr><td>GET</td><td><code>/health</code></td><td>Service status: <code>{{"status": "ok"}}</code></td></tr>
          <tr><td>GET</td><td><code>/v1/bmi</code></td><td>Query parameters, metric or imperial pair</td></tr>
          <tr><td>POST</td><td><code>/v1/bmi</code></td><td>JSON body <code>{{units, weight, height}}</code></td></tr>
        </tbody>
      </table>

      <h3>Accepted ranges</h3>
      <table>
        <thead><tr><th>Parameter</th><th>Units</th><th>Range</th></tr></thead>
        <tbody>
{limit_rows}
        </tbody>
      </table>

      <h3>Error responses</h3>
      <table>
        <thead><tr><th>Status</th><th>Cause</th></tr></thead>
        <tbody>
          <tr><td>400</td><td>Malformed JSON, invalid units, non-numeric or out-of-range values</td></tr>
          <tr><td>500</td><td>Unexpected server error</td></tr>
        </tbody>
      </table>
    </section>

    <section id="education">
      <h2>Understanding BMI</h2>
      <p>BMI = weight (kg) / height&sup2; (m&sup2;)</p>
      <table>
        <thead><tr><th>BMI</th><th>Category</th></tr></thead>
        <tbody>
          <tr><td>&lt; 18.5</td><td>Underweight</td></tr>
          <tr><td>18.5 &ndash; 24.9</td><td>Normal weight</td></tr>
          <tr><td>25.0 &ndash; 29.9</td><td>Overweight</td></tr>
          <tr><td>&ge; 30.0</td><td>Obesity</td></tr>
        </tbody>
      </table>
      <p class="disclaimer"><strong>Disclaimer:</strong> This is not medical advice. BMI does not account for
        muscle mass, bone density or body composition.</p>
    </section>
  </main>

  <script>
    document.getElementById('bmiForm').addEventListener('submit', async (event) => {{
      event.preventDefault();
      const units = document.querySelector('input[name="units"]:checked').value;
      const weight = parseFloat(document.getElementById('weight').value);
      const height = parseFloat(document.getElementById('height').value);
      const result = document.getElementById('result');
      const error = document.getElementById('error');
      result.classList.add('hidden');
      error.classList.add('hidden');
      const response = await fetch('/v1/bmi', {{
        method: 'POST',
        headers: {{ 'Content-Type': 'application/json' }},
        body: JSON.stringify({{ units, weight, height }})
      }});
      const data = await response.json();
      if (!response.ok) {{
        error.textContent = 'Error: ' + data.error;
        error.classList.remove('hidden');
        return;
      }}
      result.textContent = JSON.stringify(data, null, 2);
      result.classList.remove('hidden');
    }});
  </script>
</body>
</html>
"""


def _limit_rows() -> str:
    rows = []
    for units, limits in LIMITS.items():
        for limit in limits:
            rows.append(
                f"          <tr><td><code>{limit.name}</code></td><td>{units}</td>"
                f"<td>{limit.minimum}&ndash;{limit.maximum}</td></tr>"
            )
    return "\n".join(rows)


@lru_cache(maxsize=1)
def render_index_page() -> str:
    """Render the landing page once. Its content never changes at runtime."""
    return PAGE_TEMPLATE.format(version=settings.app.version, limit_rows=_limit_rows())


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    return HTMLResponse(content=render_index_page())
