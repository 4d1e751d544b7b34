import json
import logging
import os
import sys
from typing import Optional

from flask import Flask, request, render_template_string

# Ensure the project root is importable when run as ``python scripts/web_app.py``
current_dir = os.path.dirname(__file__)
project_root = os.path.abspath(os.path.join(current_dir, ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from rdf_form import EngineConfig, FormError, FormSession
from rdf_form.mutation import coerce_value
from rdf_form.namespaces import RDF_TYPE
from rdf_form.reporting import build_form_report

logger = logging.getLogger(__name__)

app = Flask(__name__)

_session: Optional[FormSession] = None

FORM_HTML = """<!doctype html>
<html>
<head>
  <title>RDF Form</title>
  <style>
    body { font-family: system-ui, sans-serif; margin: 24px; }
    form { display: grid; gap: 16px; max-width: 800px; }
    .iri { font-weight: 400; opacity: 0.6; font-size: 12px; }
    .types { border: 1px solid #e5e7eb; border-radius: 8px; background: #f9fafb; padding: 12px; margin: 16px 0 20px; }
    .error { color: red; }
    input[type=text], textarea { width: 100%; }
    pre { white-space: pre-wrap; background: #f8f8f8; padding: 8px; }
  </style>
</head>
<body>
  <h2>Generated RDF form</h2>
  <div class="iri">Endpoint: {{ session.config.endpoint }} &middot; IRI: {{ session.resource_iri }}</div>

  {% if session.loading %}<p>Loading&hellip;</p>{% endif %}
  {% if session.error %}<p class="error">Error: {{ session.error }}</p>{% endif %}

  {% if session.model and session.model.types %}
    <section class="types">
      <h3>Graph types (rdf:type)</h3>
      <ul>
        {% for t in session.model.types %}
          <li>
            <strong>{{ t.label }}</strong> <span class="iri">({{ t.iri }})</span>
            {% if t.description %}<div>{{ t.description }}</div>{% endif %}
          </li>
        {% endfor %}
      </ul>
    </section>
  {% endif %}

  {% if session.store %}
    <form method="post">
      {% for key, field in session.store.fields.items() %}
        {% set locked = key == rdf_type %}
        <div>
          <label for="{{ key }}"><strong>{{ field.label }}</strong> <span class="iri">({{ key }})</span></label>
          {% if field.kind == "boolean" %}
            <input type="checkbox" id="{{ key }}" name="{{ key }}" {% if field.value %}checked{% endif %} {% if locked %}disabled{% endif %}>
          {% elif field.kind == "number" %}
            <input type="number" step="any" id="{{ key }}" name="{{ key }}" value="{{ '' if field.value is none else field.value }}" {% if locked %}disabled{% endif %}>
          {% elif field.kind == "date" %}
            <input type="date" id="{{ key }}" name="{{ key }}" value="{{ field.value }}" {% if locked %}disabled{% endif %}>
          {% elif field.kind == "textarea" %}
            <textarea id="{{ key }}" name="{{ key }}" rows="5" {% if locked %}readonly{% endif %}>{{ field.value }}</textarea>
          {% elif field.kind == "iri" %}
            <input type="text" id="{{ key }}" value="{{ field.value }}" readonly>
          {% else %}
            <input type="text" id="{{ key }}" name="{{ key }}" value="{{ field.value }}" {% if locked %}readonly{% endif %}>
          {% endif %}
        </div>
      {% endfor %}
      <input type="submit" value="Show JSON (fields + types)">
      <details>
        <summary>Raw Turtle</summary>
        <pre>{{ session.raw }}</pre>
      </details>
    </form>
  {% endif %}

  {% if report %}
    <h3>Submitted form</h3>
    <pre>{{ report }}</pre>
  {% endif %}
</body>
</html>"""


def get_session() -> FormSession:
    global _session
    if _session is None:
        _session = FormSession(EngineConfig.from_env())
    return _session


def apply_submission(session: FormSession, form) -> None:
    """Copy submitted values into the session's mutation store."""
    for predicate, field in list(session.store.fields.items()):
        if field.kind == "iri" or predicate == RDF_TYPE:
            continue
        # Unchecked checkboxes are simply absent from the submission.
        if field.kind != "boolean" and predicate not in form:
            continue
        session.update(predicate, coerce_value(field, form.get(predicate)))


@app.route("/", methods=["GET", "POST"])
def index():
    session = get_session()
    report = None
    if request.method == "POST":
        if session.store is None:
            return "No form loaded", 400
        apply_submission(session, request.form)
        report = json.dumps(
            build_form_report(session.model, session.store), indent=2, ensure_ascii=False
        )
    else:
        iri = request.args.get("iri", "").strip() or None
        if session.model is None or (iri and iri != session.resource_iri):
            try:
                session.load(iri)
            except (FormError, ValueError) as exc:
                # The session keeps the previous form and exposes the message.
                logger.debug("Rendering error page: %s", exc)
    status = 502 if session.error else 200
    return render_template_string(FORM_HTML, session=session, report=report, rdf_type=RDF_TYPE), status


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
