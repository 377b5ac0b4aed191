# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SettingsController - Example controller laying out a settings screen.

A didactic example showing nested subview() blocks, stylenames with
explicit overrides, and restyling on a device rotation.
"""

from __future__ import annotations

from genro_viewtree import Stylesheet, ViewController, ViewNode


class Label(ViewNode):
    __slots__ = ()


class Switch(ViewNode):
    __slots__ = ()


class Section(ViewNode):
    __slots__ = ()


def make_stylesheets() -> tuple[Stylesheet, Stylesheet]:
    """Return the (portrait, landscape) stylesheets."""
    base = Stylesheet('base')
    base.style('heading', size=22, color='black')
    base.style('row_label', size=14, color='darkgrey')
    base.style('section', width=320, padding=8)

    portrait = Stylesheet('portrait')
    portrait.import_stylesheet(base)

    landscape = Stylesheet('landscape')
    landscape.import_stylesheet(base)
    landscape.style('section', width=480)
    landscape.style('heading', size=28)

    return portrait, landscape


class SettingsController(ViewController):
    """A settings screen with two sections.

    Example:
        >>> portrait, landscape = make_stylesheets()
        >>> controller = SettingsController(stylesheet=portrait)
        >>> controller.load_view()
        >>> controller.rotate(landscape)
        >>> controller.print_tree()
    """

    def load_view(self) -> None:
        self.subview(Label, 'heading', text='Settings')
        self.subview(Section, 'section', block=self.network_section)
        self.subview(Section, 'section', {'padding': 0}, block=self.display_section)

    def network_section(self, section: ViewNode) -> None:
        self.subview(Label, 'row_label', text='Wi-Fi')
        self.subview(Switch, on=True)

    def display_section(self, section: ViewNode) -> None:
        self.subview(Label, 'row_label', text='Dark mode', color='white')
        self.subview(Switch, on=False)

    def rotate(self, stylesheet: Stylesheet) -> None:
        """Swap stylesheets, restyling every node already on screen."""
        self.stylesheet = stylesheet

    def print_tree(self) -> None:
        """Print the hierarchy for debugging."""
        print("=" * 60)
        print(f"SETTINGS ({getattr(self.stylesheet, 'name', None)})")
        print("=" * 60)
        self._print_node(self.view, 0)

    def _print_node(self, node: ViewNode, depth: int) -> None:
        for child in node.children:
            props = ' '.join(f'{k}={v}' for k, v in child.properties.items())
            print(f"{'  ' * depth}{type(child).__name__} [{child.stylename or '-'}] {props}")
            self._print_node(child, depth + 1)


if __name__ == '__main__':
    portrait, landscape = make_stylesheets()
    controller = SettingsController(stylesheet=portrait)
    controller.load_view()
    controller.print_tree()
    controller.rotate(landscape)
    controller.print_tree()
