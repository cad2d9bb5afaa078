"""Server-side HTML rendering for the briefing page."""

from jinja2 import Environment

from exec_assistant.processing.types import Priority
from exec_assistant.web.view import AssistantView

_BADGE_CLASS: dict[Priority, str] = {
    Priority.LOW: "badge-low",
    Priority.NORMAL: "badge-normal",
    Priority.ELEVATED: "badge-elevated",
    Priority.HIGH: "badge-high",
    Priority.URGENT: "badge-urgent",
}

STYLE = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: #f9fafb; color: #111827; }
header { background: #fff; border-bottom: 1px solid #e5e7eb; position: sticky; top: 0; }
.bar { max-width: 1024px; margin: 0 auto; padding: 0 16px; height: 64px; display: flex; align-items: center; justify-content: space-between; }
h1 { font-size: 1.25rem; }
h2 { font-size: 1.1rem; margin-bottom: 16px; }
main { max-width: 1024px; margin: 32px auto; padding: 0 16px; }
section { margin-bottom: 32px; }
.panel { background: #fff; border: 1px solid #e5e7eb; border-radius: 16px; padding: 24px; }
.grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 24px; }
.grid input, .grid textarea { width: 100%; padding: 8px 12px; border: 1px solid #d1d5db; border-radius: 8px; margin-bottom: 12px; font: inherit; font-size: 0.875rem; }
.grid textarea { min-height: 120px; resize: none; }
button { padding: 8px 24px; border: 0; border-radius: 999px; background: #4f46e5; color: #fff; font-weight: 500; cursor: pointer; }
button:disabled { background: #e5e7eb; color: #6b7280; cursor: not-allowed; }
.error { background: #fef2f2; border: 1px solid #fecaca; color: #b91c1c; padding: 12px 16px; border-radius: 12px; margin-bottom: 32px; }
.result { background: #fff; border: 1px solid #e5e7eb; border-radius: 12px; padding: 20px; margin-bottom: 16px; display: flex; justify-content: space-between; gap: 16px; }
.result h3 { font-size: 1rem; margin: 4px 0 8px; }
.meta { font-size: 0.75rem; color: #6b7280; }
.score { min-width: 100px; text-align: center; background: #f9fafb; border-radius: 8px; padding: 12px; }
.score b { display: block; font-size: 1.5rem; color: #4f46e5; }
.badge { padding: 2px 10px; border-radius: 999px; font-size: 0.75rem; font-weight: 600; }
.badge-low { background: #dbeafe; color: #1e40af; }
.badge-normal { background: #fef9c3; color: #854d0e; }
.badge-elevated { background: #ffedd5; color: #9a3412; }
.badge-high { background: #fee2e2; color: #991b1b; }
.badge-urgent { background: #dc2626; color: #fff; }
.empty { text-align: center; padding: 80px 0; border: 2px dashed #e5e7eb; border-radius: 16px; color: #6b7280; }
"""


# Edits go out one at a time so they reach the store in typing order, and the
# analyze request waits for the last one.
SCRIPT = """
var pending = Promise.resolve();
function sendEdit(id, field, value) {
  pending = pending.then(function () {
    return fetch('/api/emails/' + encodeURIComponent(id), {
      method: 'PATCH',
      headers: {'Content-Type': 'application/json'},
      body: JSON.stringify({field: field, value: value})
    });
  }).catch(function (err) { console.error('Failed to save edit', err); });
}
document.querySelectorAll('[data-field]').forEach(function (el) {
  el.addEventListener('input', function () {
    sendEdit(el.dataset.id, el.dataset.field, el.value);
  });
});
document.getElementById('analyze').addEventListener('click', async function (ev) {
  var btn = ev.currentTarget;
  btn.disabled = true;
  btn.textContent = 'Analyzing...';
  try {
    await pending;
    await fetch('/api/analyze', {method: 'POST'});
  } finally {
    window.location.reload();
  }
});
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Executive Assistant</title>
  <style>{{ style | safe }}</style>
</head>
<body>
<header><div class="bar">
  <h1>Executive Assistant</h1>
  {% if view.loading %}<button id="analyze" disabled>Analyzing...</button>
  {% else %}<button id="analyze">Summarize &amp; Prioritize</button>{% endif %}
</div></header>
<main>
  <section class="panel">
    <h2>Incoming Emails ({{ emails | length }})</h2>
    <div class="grid">
    {% for email in emails %}
      <div>
        <input type="text" placeholder="Sender" data-id="{{ email.id }}" data-field="sender" value="{{ email.sender }}">
        <input type="text" placeholder="Subject" data-id="{{ email.id }}" data-field="subject" value="{{ email.subject }}">
        <textarea placeholder="Email body content..." data-id="{{ email.id }}" data-field="body">{{ email.body }}</textarea>
      </div>
    {% endfor %}
    </div>
  </section>
  {% if view.error %}<div class="error">{{ view.error }}</div>{% endif %}
  <section>
    <h2>Executive Briefing</h2>
    {% for result in view.results %}
    <div class="result">
      <div>
        <span class="badge {{ badge_class[result.analysis.priority] }}">{{ result.priority_label }} ({{ result.priority_score }})</span>
        <span class="meta">ID: {{ result.id }}</span>
        <h3>{{ result.summary }}</h3>
        <div class="meta">{{ result.sender }} · {{ result.subject }}</div>
      </div>
      <div class="score"><b>{{ result.priority_score }}</b><span class="meta">SCORE</span></div>
    </div>
    {% else %}
    <div class="empty">Analysis results will appear here. Click "Summarize &amp; Prioritize" to begin.</div>
    {% endfor %}
  </section>
</main>
<script>{{ script | safe }}</script>
</body>
</html>
"""

_env = Environment(autoescape=True)
_page = _env.from_string(PAGE_TEMPLATE)


def render_page(view: AssistantView) -> str:
    """Render the full page for the current store and view state."""
    return _page.render(
        view=view,
        emails=view.store.snapshot(),
        badge_class=_BADGE_CLASS,
        style=STYLE,
        script=SCRIPT,
    )
