"""HTML rendering through a Jinja2 template.

Descriptions may carry inline Markdown (backticks are common in
externals documentation), so they pass through the ``markdown`` library
before being placed in the template.
"""
from typing import Optional

import markdown
from jinja2 import Environment, select_autoescape
from markupsafe import Markup, escape

from docucomment.features.rendering.markdown import param_label
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import DocComment, FunctionDeclaration

DOC_COMMENT_TEMPLATE = """\
<section class="docu-comment"{% if declaration %} id="{{ declaration.name }}"{% endif %}>
{% if declaration %}
<h{{ config.heading_level }}><code>{{ declaration.name }}</code></h{{ config.heading_level }}>
{% endif %}
<p class="description">{{ comment.description | inline_markdown }}</p>
{% if declaration %}
<pre><code class="language-{{ config.code_language }}">{{ declaration.source }}</code></pre>
{% endif %}
{% if params %}
<p class="parameters-label"><strong>{{ config.parameters_label }}</strong></p>
<dl class="parameters">
{% for label, description in params %}
<dt><code>{{ label }}</code></dt>
<dd>{{ description | inline_markdown }}</dd>
{% endfor %}
</dl>
{% endif %}
{% if comment.return_description is not none %}
<p class="return-label"><strong>{{ config.return_label }}</strong></p>
<p class="return">{{ comment.return_description | inline_markdown }}</p>
{% endif %}
</section>
"""


def _inline_markdown() -> markdown.Markdown:
    # Raw HTML in comment text is escaped rather than passed through
    md = markdown.Markdown()
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md


def render_inline_markdown(text: str) -> Markup:
    """Render a single line of Markdown without the wrapping paragraph.

    Only inline markup is honoured. Text that Markdown would turn into a
    block (a list, heading, quote or rule) is emitted escaped and verbatim.
    """
    html = _inline_markdown().convert(text)
    if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
        return Markup(html[len("<p>"):-len("</p>")])
    return escape(text)


_env = Environment(
    autoescape=select_autoescape(["html", "xml"], default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
_env.filters["inline_markdown"] = render_inline_markdown
_template = _env.from_string(DOC_COMMENT_TEMPLATE)


def render_html(
    comment: DocComment,
    declaration: Optional[FunctionDeclaration] = None,
    config: Optional[DocuCommentConfig] = None,
) -> str:
    """Render a docu comment as an HTML ``<section>``.

    Args:
        comment: Parsed comment
        declaration: Declaration the comment documents, if any
        config: Rendering options (defaults when omitted)

    Returns:
        HTML fragment ending with a newline
    """
    config = config or DocuCommentConfig()
    params = [(param_label(p, declaration), p.description) for p in comment.params]
    return _template.render(comment=comment, declaration=declaration, config=config, params=params)
