"""Standalone preview page for rendered form fragments."""

from __future__ import annotations

from tinyhtml import h, html, raw

_BASE_CSS = (
    "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;"
    "line-height:1.4;margin:2rem}"
    "fieldset{border:1px solid #ccc;margin:0 0 1rem;padding:.75rem 1rem}"
    "legend{font-weight:600;padding:0 .25rem}"
    "input,select,textarea{display:block;margin:.25rem 0 .75rem}"
    "@media (prefers-color-scheme: dark){body{background:#111;color:#eee}fieldset{border-color:#555}}"
)


def render_form_page(
    title: str,
    body_html: str,
    *,
    action: str = "",
    method: str = "post",
    extra_css: str = "",
) -> str:
    form_attrs = {"method": method}
    if action:
        form_attrs["action"] = action
    return html(lang="en")(
        h("head")(
            h("meta", charset="utf-8"),
            h("meta", name="color-scheme", content="light dark"),
            h("title")(title),
            h("style")(raw(_BASE_CSS + extra_css)),
        ),
        h("body")(h("form", **form_attrs)(raw(body_html))),
    ).render()
