"""Server-side HTML for the admin pages."""

from __future__ import annotations

from html import escape

from ..context import LayoutContext
from ..menu import iter_links
from ..pages import InventoryPage, PlaceholderPage
from ..toast import ToastMessage

_FORM_FIELDS = (
    ("food_ingredient_id", "Ingredient ID"),
    ("quantity", "Quantity"),
    ("total_amount", "Total Amount"),
    ("supplier_id", "Supplier ID"),
)


def _fmt(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return escape(str(value))


def render_toasts(messages: list[ToastMessage]) -> str:
    if not messages:
        return ""
    items = "".join(
        f'<li class="toast toast-{m.severity}" data-life="{m.life}">'
        f"<strong>{escape(m.summary)}</strong> {escape(m.detail)}</li>"
        for m in messages
    )
    return f'<ul class="toasts">{items}</ul>'


def render_layout(context: LayoutContext, title: str, body: str) -> str:
    nav = "".join(
        f'<li><a href="{escape(item.to or "")}">{escape(item.label)}</a></li>'
        for item in iter_links()
    )
    cfg = context.layout_config
    return (
        "<!DOCTYPE html>"
        f'<html><head><meta charset="UTF-8"><title>{escape(context.app_title)}</title></head>'
        f'<body class="theme-{escape(cfg.theme)} scheme-{escape(cfg.color_scheme)}" '
        f'style="font-size:{cfg.scale}px">'
        f'<nav><ul class="menu">{nav}</ul></nav>'
        f'<main class="card"><h1>{escape(title)}</h1>{body}</main>'
        "</body></html>"
    )


def render_placeholder(context: LayoutContext, page: PlaceholderPage) -> str:
    return render_layout(context, page.title, render_toasts(page.toasts.drain()))


def _render_dialog(page: InventoryPage) -> str:
    if not page.show_form:
        return ""
    record = page.current_record
    header = "Edit Record" if page.is_edit else "Add Record"
    fields = "".join(
        f'<div class="field"><label for="{name}">{label}</label>'
        f'<input id="{name}" name="{name}" '
        f'value="{_fmt(getattr(record, name) if record else None)}"></div>'
        for name, label in _FORM_FIELDS
    )
    return (
        f'<dialog open><h2>{header}</h2>'
        f'<form method="post" action="/records/save">{fields}'
        '<button type="submit">Save</button></form>'
        '<form method="post" action="/records/cancel"><button type="submit">Cancel</button></form>'
        "</dialog>"
    )


def render_inventory(context: LayoutContext, page: InventoryPage) -> str:
    rows = "".join(
        "<tr>"
        f"<td>{_fmt(r.id)}</td><td>{_fmt(r.food_ingredient_id)}</td>"
        f"<td>{_fmt(r.quantity)}</td><td>{_fmt(r.total_amount)}</td>"
        f"<td>{_fmt(r.supplier_id)}</td>"
        "<td>"
        f'<form method="post" action="/records/{r.id}/edit"><button>Edit</button></form>'
        f'<form method="post" action="/records/{r.id}/delete"><button>Delete</button></form>'
        "</td></tr>"
        for r in page.inventory
    )
    loading = ' aria-busy="true"' if page.table_loading else ""
    body = (
        render_toasts(page.toasts.drain())
        + '<form method="post" action="/records/new"><button>Add New</button></form>'
        + f"<table{loading}><thead><tr><th>ID</th><th>Ingredient ID</th><th>Quantity</th>"
        "<th>Total Amount</th><th>Supplier ID</th><th></th></tr></thead>"
        f"<tbody>{rows}</tbody></table>"
        + _render_dialog(page)
    )
    return render_layout(context, page.title, body)
