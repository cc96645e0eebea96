"""Screens that only show a heading and a toast area so far."""

from __future__ import annotations

from ..toast import ToastBuffer, ToastRef


class PlaceholderPage:
    title = ""

    def __init__(self) -> None:
        self.toasts = ToastBuffer()
        self.toast = ToastRef()
        self.toast.attach(self.toasts)


class FoodWastePage(PlaceholderPage):
    title = "FoodWaste"


class EmployeeAwardPage(PlaceholderPage):
    title = "EmployeeAward"
