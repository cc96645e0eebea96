"""Navigation menu model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MenuItem:
    label: str
    icon: str | None = None
    to: str | None = None
    items: tuple["MenuItem", ...] = field(default_factory=tuple)


MENU: tuple[MenuItem, ...] = (
    MenuItem(
        label="Dashboards",
        icon="pi pi-home",
        items=(
            MenuItem(label="Home", icon="pi pi-fw pi-home", to="/"),
            MenuItem(label="Food Waste", icon="pi pi-fw pi-palette", to="/foodWaste"),
            MenuItem(label="Employee Award", icon="pi pi-fw pi-heart-fill", to="/employeeAward"),
        ),
    ),
)


def iter_links(items: tuple[MenuItem, ...] = MENU):
    """Yield every leaf item that has a route, depth first."""
    for item in items:
        if item.to is not None:
            yield item
        yield from iter_links(item.items)
