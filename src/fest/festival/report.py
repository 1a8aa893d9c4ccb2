"""Plain-text report of a change plan, rendered from a Jinja2 template."""

import importlib.resources

import jinja2

from fest.festival.changes import ChangePlan


REPORT_TITLE = "Festival Renumbering Report"


def _load_template(template_name: str) -> jinja2.Template:
    templates = importlib.resources.files(f"{__package__}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(source)


def render_report(plan: ChangePlan, title: str = REPORT_TITLE) -> str:
    """Render one line per change followed by the total."""
    return _load_template("renumber_report.j2").render(title=title, changes=plan.changes)
