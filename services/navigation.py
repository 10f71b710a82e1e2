# services/navigation.py

from dataclasses import dataclass
from typing import Union

from models import AppTab, MenuView


@dataclass
class ViewRouter:
    """Two-level navigation: active tab and the menu sub-view.

    Transitions are plain assignments; the sub-view is kept when the tab
    changes and only matters while the menu tab is active.
    """
    tab: AppTab = AppTab.MENU
    view: MenuView = MenuView.MAIN

    def select_tab(self, tab: Union[AppTab, str]) -> None:
        self.tab = AppTab(tab)

    def open_view(self, view: Union[MenuView, str]) -> None:
        self.view = MenuView(view)

    def back(self) -> None:
        self.view = MenuView.MAIN

    @property
    def in_menu_view(self) -> bool:
        return self.tab == AppTab.MENU and self.view != MenuView.MAIN
