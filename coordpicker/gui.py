"""Desktop window for the coordinate picker, drawn with tkinter."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

try:
    import tkinter as tk
    from tkinter import colorchooser, ttk
except ImportError:  # tkinter is optional in some Python builds
    tk = None
    ttk = None
    colorchooser = None

from coordpicker.geometry import Point, Rect, Vector
from coordpicker.marker import Color
from coordpicker.picker import (
    CUSTOM_RESOLUTION,
    MAX_CUSTOM_SIZE,
    MAX_GRID_SIZE,
    MIN_CUSTOM_SIZE,
    MIN_GRID_SCREEN_SPACING,
    MIN_GRID_SIZE,
    CoordinatePicker,
    format_position,
)

WINDOW_TITLE = "Coordinate Picker"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800
MIN_WIDTH = 800
MIN_HEIGHT = 600
ZOOM_STEP = 1.1
CROSSHAIR_SIZE = 10.0
MARKER_RADIUS = 5.0
SNAP_RING_RADIUS = 8.0
CLICK_SLOP = 3.0

# Alt is Mod1 on X11 and a separate bit on Windows.
_ALT_MASK = 0x0008 | 0x20000

_HELP_LINES = (
    "• Click to place a marker",
    "• Right-click to remove a marker at cursor position",
    "• Use 'Delete' button to remove specific markers from the list",
    "• Use 'Copy All Coordinates' to copy all marker coordinates at once",
    "• Middle-click or Alt+drag to pan",
    "• Scroll to zoom in/out",
    "• Adjust grid settings for precise positioning",
    "• Grid snapping finds the nearest grid intersection to your cursor",
)


def scroll_zoom_factor(delta: float) -> float:
    """Zoom factor for one scroll step: in for positive, out for negative."""
    if delta > 0:
        return ZOOM_STEP
    if delta < 0:
        return 1.0 / ZOOM_STEP
    return 1.0


def _rgb(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _blend(rgba: tuple[int, int, int, int], background: tuple[int, int, int]) -> str:
    """Composite a premultiplied colour over an opaque background."""
    r, g, b, a = rgba
    keep = 1.0 - a / 255.0
    channels = (
        min(255, round(c + bg * keep)) for c, bg in zip((r, g, b), background)
    )
    return _rgb(*channels)


def _tk_color(color: Color) -> str:
    return _rgb(color.r, color.g, color.b)


def _window_dimension(minimum: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}")
        return value

    return convert


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line: initial window size and theme."""
    parser = argparse.ArgumentParser(
        prog="coordpicker",
        description="Determine screen coordinates for 2D application development.",
    )
    parser.add_argument(
        "--width",
        type=_window_dimension(MIN_WIDTH),
        default=DEFAULT_WIDTH,
        help=f"initial window width (at least {MIN_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=_window_dimension(MIN_HEIGHT),
        default=DEFAULT_HEIGHT,
        help=f"initial window height (at least {MIN_HEIGHT})",
    )
    parser.add_argument(
        "--light", action="store_true", help="start in light mode instead of dark mode"
    )
    return parser.parse_args(argv)


class PickerWindow:
    """A window showing the canvas, its grid and markers, and the settings panel."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        picker: CoordinatePicker | None = None,
        dark_mode: bool | None = None,
    ) -> None:
        if tk is None:
            raise RuntimeError("tkinter is not available in this Python installation")
        self.picker = picker if picker is not None else CoordinatePicker()
        if dark_mode is not None:
            self.picker.ui_state.dark_mode = dark_mode

        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{width}x{height}")
        self.root.minsize(MIN_WIDTH, MIN_HEIGHT)

        self._pointer: Point | None = None
        self._press: Point | None = None
        self._last_drag: Point | None = None
        self._dragged = False
        self._shown_lines: list[str] = []

        self._build_top_bar()
        self._build_settings()
        self._build_canvas()
        self._sync_custom_size()
        self.redraw()

    # Layout

    def _build_top_bar(self) -> None:
        bar = ttk.Frame(self.root, padding=6)
        bar.pack(side=tk.TOP, fill=tk.X)
        ttk.Label(bar, text=WINDOW_TITLE, font="TkHeadingFont").pack(side=tk.LEFT, padx=5)
        ttk.Separator(bar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)
        ttk.Button(bar, text="Reset View", command=self._reset_view).pack(side=tk.LEFT, padx=5)
        ttk.Button(bar, text="Clear Markers", command=self._clear_markers).pack(
            side=tk.LEFT, padx=5
        )
        ttk.Separator(bar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)
        ttk.Label(bar, text="Zoom:").pack(side=tk.LEFT, padx=5)
        self._zoom_text = tk.StringVar()
        ttk.Label(bar, textvariable=self._zoom_text).pack(side=tk.LEFT)

    def _build_settings(self) -> None:
        state = self.picker.ui_state
        panel = ttk.Frame(self.root, padding=10, width=250)
        panel.pack(side=tk.RIGHT, fill=tk.Y)
        ttk.Label(panel, text="Settings", font="TkHeadingFont").pack(anchor=tk.W)

        size_box = ttk.LabelFrame(panel, text="Canvas Size", padding=6)
        size_box.pack(fill=tk.X, pady=4)
        self._resolution = tk.StringVar(value=state.selected_resolution)
        combo = ttk.Combobox(
            size_box,
            textvariable=self._resolution,
            values=list(self.picker.resolution_presets),
            state="readonly",
        )
        combo.pack(fill=tk.X)
        combo.bind("<<ComboboxSelected>>", lambda _event: self._on_resolution())
        self._custom_width = tk.StringVar()
        self._custom_height = tk.StringVar()
        self._custom_spins = []
        for label, variable in (("Width:", self._custom_width), ("Height:", self._custom_height)):
            row = ttk.Frame(size_box)
            row.pack(fill=tk.X, pady=2)
            ttk.Label(row, text=label).pack(side=tk.LEFT)
            spin = ttk.Spinbox(
                row,
                from_=MIN_CUSTOM_SIZE,
                to=MAX_CUSTOM_SIZE,
                increment=1.0,
                textvariable=variable,
                width=8,
                command=self._on_custom_size,
            )
            spin.pack(side=tk.RIGHT)
            spin.bind("<Return>", lambda _event: self._on_custom_size())
            spin.bind("<FocusOut>", lambda _event: self._on_custom_size())
            self._custom_spins.append(spin)

        grid_box = ttk.LabelFrame(panel, text="Grid", padding=6)
        grid_box.pack(fill=tk.X, pady=4)
        self._show_grid = tk.BooleanVar(value=state.show_grid)
        ttk.Checkbutton(
            grid_box, text="Show Grid", variable=self._show_grid, command=self._on_grid
        ).pack(anchor=tk.W)
        row = ttk.Frame(grid_box)
        row.pack(fill=tk.X, pady=2)
        ttk.Label(row, text="Grid Size:").pack(side=tk.LEFT)
        self._grid_size = tk.StringVar(value=f"{state.grid_size:g}")
        grid_spin = ttk.Spinbox(
            row,
            from_=MIN_GRID_SIZE,
            to=MAX_GRID_SIZE,
            increment=1.0,
            textvariable=self._grid_size,
            width=6,
            command=self._on_grid,
        )
        grid_spin.pack(side=tk.RIGHT)
        grid_spin.bind("<Return>", lambda _event: self._on_grid())
        grid_spin.bind("<FocusOut>", lambda _event: self._on_grid())
        self._snapping = tk.BooleanVar(value=state.enable_snapping)
        ttk.Checkbutton(
            grid_box, text="Snap to Grid", variable=self._snapping, command=self._on_grid
        ).pack(anchor=tk.W)

        system_box = ttk.LabelFrame(panel, text="Coordinate System", padding=6)
        system_box.pack(fill=tk.X, pady=4)
        self._origin_top_left = tk.BooleanVar(value=state.origin_top_left)
        ttk.Radiobutton(
            system_box,
            text="Origin at Top-Left (0,0)",
            variable=self._origin_top_left,
            value=True,
            command=self._on_origin,
        ).pack(anchor=tk.W)
        ttk.Radiobutton(
            system_box,
            text="Origin at Bottom-Left (0,0)",
            variable=self._origin_top_left,
            value=False,
            command=self._on_origin,
        ).pack(anchor=tk.W)
        self._recalculate = tk.BooleanVar(value=state.recalculate_markers)
        ttk.Checkbutton(
            system_box,
            text="Recalculate markers on origin change",
            variable=self._recalculate,
            command=self._on_recalculate,
        ).pack(anchor=tk.W)

        marker_box = ttk.LabelFrame(panel, text="Markers", padding=6)
        marker_box.pack(fill=tk.X, pady=4)
        ttk.Label(marker_box, text="Marker Color:").pack(side=tk.LEFT)
        self._swatch = tk.Label(
            marker_box, width=3, background=_tk_color(state.marker_color), relief=tk.SUNKEN
        )
        self._swatch.pack(side=tk.LEFT, padx=4)
        ttk.Button(marker_box, text="Choose…", command=self._choose_color).pack(side=tk.LEFT)

        ttk.Label(panel, text="Current Position", font="TkHeadingFont").pack(
            anchor=tk.W, pady=(8, 0)
        )
        row = ttk.Frame(panel)
        row.pack(fill=tk.X)
        self._position_text = tk.StringVar()
        ttk.Label(row, textvariable=self._position_text).pack(side=tk.LEFT)
        ttk.Button(
            row,
            text="Copy",
            command=lambda: self.copy_to_clipboard(self.picker.current_position_text()),
        ).pack(side=tk.RIGHT)
        self._raw_text = tk.StringVar()
        ttk.Label(panel, textvariable=self._raw_text).pack(anchor=tk.W)

        ttk.Label(panel, text="Saved Markers", font="TkHeadingFont").pack(
            anchor=tk.W, pady=(8, 0)
        )
        self._copy_all = ttk.Button(
            panel,
            text="Copy All Coordinates",
            command=lambda: self.copy_to_clipboard(self.picker.all_coordinates_text()),
        )
        self._copy_all.pack(anchor=tk.W)
        self._marker_list = tk.Listbox(panel, height=10, exportselection=False)
        self._marker_list.pack(fill=tk.X, pady=2)
        row = ttk.Frame(panel)
        row.pack(fill=tk.X)
        ttk.Button(row, text="Copy", command=self._copy_selected).pack(side=tk.LEFT)
        ttk.Button(row, text="Delete", command=self._delete_selected).pack(side=tk.LEFT, padx=4)

        appearance = ttk.LabelFrame(panel, text="Appearance", padding=6)
        appearance.pack(fill=tk.X, pady=4)
        self._dark_mode = tk.BooleanVar(value=state.dark_mode)
        ttk.Checkbutton(
            appearance, text="Dark Mode", variable=self._dark_mode, command=self._on_dark_mode
        ).pack(anchor=tk.W)

        help_box = ttk.LabelFrame(panel, text="Help", padding=6)
        help_box.pack(fill=tk.X, pady=4)
        for line in _HELP_LINES:
            ttk.Label(help_box, text=line, wraplength=240).pack(anchor=tk.W)

    def _build_canvas(self) -> None:
        self.canvas = tk.Canvas(self.root, highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        bind = self.canvas.bind
        bind("<Configure>", lambda _event: self.redraw())
        bind("<Motion>", self._on_motion)
        bind("<Leave>", self._on_leave)
        for button in (1, 2, 3):
            bind(f"<ButtonPress-{button}>", self._on_press)
            bind(f"<ButtonRelease-{button}>", lambda event, b=button: self._on_release(event, b))
        bind("<B1-Motion>", self._on_primary_drag)
        bind("<B2-Motion>", self._on_pan_drag)
        bind("<MouseWheel>", lambda event: self._on_scroll(event, event.delta))
        bind("<Button-4>", lambda event: self._on_scroll(event, 1))
        bind("<Button-5>", lambda event: self._on_scroll(event, -1))

    # Helpers

    def _view_rect(self) -> Rect:
        return Rect(
            Point(0.0, 0.0),
            Point(float(self.canvas.winfo_width()), float(self.canvas.winfo_height())),
        )

    @staticmethod
    def _event_point(event) -> Point:
        return Point(float(event.x), float(event.y))

    def _sync_custom_size(self) -> None:
        state = self.picker.ui_state
        self._custom_width.set(f"{state.custom_width:g}")
        self._custom_height.set(f"{state.custom_height:g}")
        spin_state = "normal" if state.selected_resolution == CUSTOM_RESOLUTION else "disabled"
        for spin in self._custom_spins:
            spin.configure(state=spin_state)

    # Settings callbacks

    def _on_resolution(self) -> None:
        self.picker.select_resolution(self._resolution.get())
        self._sync_custom_size()
        self.redraw()

    def _on_custom_size(self) -> None:
        state = self.picker.ui_state
        if state.selected_resolution != CUSTOM_RESOLUTION:
            return
        try:
            width = float(self._custom_width.get())
            height = float(self._custom_height.get())
        except ValueError:
            self._sync_custom_size()
            return
        self.picker.set_custom_size(width, height)
        self._sync_custom_size()
        self.redraw()

    def _on_grid(self) -> None:
        try:
            size = float(self._grid_size.get())
        except ValueError:
            size = None
        self.picker.update_grid(size, self._show_grid.get(), self._snapping.get())
        self._grid_size.set(f"{self.picker.ui_state.grid_size:g}")
        self.redraw()

    def _on_origin(self) -> None:
        self.picker.set_origin_top_left(self._origin_top_left.get())
        self.redraw()

    def _on_recalculate(self) -> None:
        self.picker.ui_state.recalculate_markers = self._recalculate.get()

    def _choose_color(self) -> None:
        current = _tk_color(self.picker.ui_state.marker_color)
        rgb, _hex = colorchooser.askcolor(color=current, parent=self.root)
        if rgb is None:
            return
        color = Color(*(int(round(channel)) for channel in rgb))
        self.picker.ui_state.marker_color = color
        self._swatch.configure(background=_tk_color(color))

    def _on_dark_mode(self) -> None:
        self.picker.ui_state.dark_mode = self._dark_mode.get()
        self.redraw()

    def _reset_view(self) -> None:
        self.picker.canvas.reset_view()
        self.redraw()

    def _clear_markers(self) -> None:
        self.picker.clear_markers()
        self.redraw()

    def _selected_index(self) -> int | None:
        selection = self._marker_list.curselection()
        return selection[0] if selection else None

    def _copy_selected(self) -> None:
        index = self._selected_index()
        if index is None or index >= len(self.picker.markers):
            return
        position = self.picker.markers[index].system_position
        self.copy_to_clipboard(format_position(position)[1:-1])

    def _delete_selected(self) -> None:
        index = self._selected_index()
        if index is not None:
            self.picker.delete_marker(index)
            self.redraw()

    # Pointer callbacks

    def _track(self, point: Point) -> None:
        self._pointer = point
        self.picker.hover(point, self._view_rect())

    def _on_motion(self, event) -> None:
        self._track(self._event_point(event))
        self.redraw()

    def _on_leave(self, _event) -> None:
        self._pointer = None
        self.redraw()

    def _on_press(self, event) -> None:
        point = self._event_point(event)
        self._press = point
        self._last_drag = point
        self._dragged = False

    def _drag_to(self, point: Point, pan: bool) -> None:
        if self._press is not None and (point - self._press).length() > CLICK_SLOP:
            self._dragged = True
        if pan and self._last_drag is not None:
            self.picker.canvas.pan(point - self._last_drag)
        self._last_drag = point
        self._track(point)
        self.redraw()

    def _on_primary_drag(self, event) -> None:
        self._drag_to(self._event_point(event), bool(event.state & _ALT_MASK))

    def _on_pan_drag(self, event) -> None:
        self._drag_to(self._event_point(event), True)

    def _on_release(self, event, button: int) -> None:
        point = self._event_point(event)
        clicked = not self._dragged
        self._press = None
        self._last_drag = None
        self._dragged = False
        if not clicked:
            return
        view = self._view_rect()
        if button == 1:
            self.picker.place_marker(point, view)
        elif button == 3:
            self.picker.remove_marker_at(point, view)
        self.redraw()

    def _on_scroll(self, event, delta: float) -> None:
        if delta == 0:
            return
        point = self._event_point(event)
        view = self._view_rect()
        self.picker.canvas.zoom_at(scroll_zoom_factor(delta), point, view)
        self._track(point)
        self.redraw()

    # Drawing

    def _background(self) -> tuple[int, int, int]:
        return (20, 20, 20) if self.picker.ui_state.dark_mode else (240, 240, 240)

    def redraw(self) -> None:
        """Repaint the canvas and refresh every value shown in the panels."""
        picker = self.picker
        dark = picker.ui_state.dark_mode
        draw = self.canvas
        draw.delete("all")
        view = self._view_rect()
        background = self._background()
        draw.configure(background=_rgb(*background))

        border = picker.canvas.screen_rect(view)
        if picker.grid.visible:
            self._draw_grid(view, background)
        border_color = _rgb(150, 150, 150) if dark else _rgb(100, 100, 100)
        draw.create_rectangle(
            border.min.x, border.min.y, border.max.x, border.max.y, outline=border_color, width=2
        )

        text_color = "white" if dark else "black"
        for marker in picker.markers:
            screen = picker.canvas.canvas_to_screen(marker.position, view)
            fill = _tk_color(marker.color)
            draw.create_oval(
                screen.x - MARKER_RADIUS,
                screen.y - MARKER_RADIUS,
                screen.x + MARKER_RADIUS,
                screen.y + MARKER_RADIUS,
                fill=fill,
                outline=fill,
            )
            draw.create_text(
                screen.x + 10.0, screen.y, text=marker.label(), anchor=tk.W, fill=text_color
            )

        if self._pointer is not None:
            self._draw_pointer(self._pointer, view, background)

        self._refresh_panels()

    def _draw_pointer(
        self, mouse: Point, view: Rect, background: tuple[int, int, int]
    ) -> None:
        draw = self.canvas
        red = _rgb(255, 0, 0)
        draw.create_line(mouse.x - CROSSHAIR_SIZE, mouse.y, mouse.x + CROSSHAIR_SIZE, mouse.y, fill=red)
        draw.create_line(mouse.x, mouse.y - CROSSHAIR_SIZE, mouse.x, mouse.y + CROSSHAIR_SIZE, fill=red)
        if not self.picker.grid.snapping:
            return
        canvas = self.picker.canvas
        snapped = self.picker.snap(canvas.screen_to_canvas(mouse, view))
        screen = canvas.canvas_to_screen(snapped, view)
        draw.create_oval(
            screen.x - SNAP_RING_RADIUS,
            screen.y - SNAP_RING_RADIUS,
            screen.x + SNAP_RING_RADIUS,
            screen.y + SNAP_RING_RADIUS,
            outline=_rgb(0, 200, 0),
            width=1.5,
        )
        if (screen - mouse).length() > 2.0:
            draw.create_line(
                mouse.x, mouse.y, screen.x, screen.y, fill=_blend((0, 200, 0, 150), background)
            )

    def _draw_grid(self, view: Rect, background: tuple[int, int, int]) -> None:
        picker = self.picker
        if picker.grid.size * picker.canvas.zoom < MIN_GRID_SCREEN_SPACING:
            return
        dark = picker.ui_state.dark_mode
        draw = self.canvas
        border = picker.canvas.screen_rect(view)
        lines = picker.grid_lines(view)

        grid_rgba = (180, 180, 180, 60) if dark else (80, 80, 80, 80)
        grid_color = _blend(grid_rgba, background)
        for x in lines.vertical:
            draw.create_line(x, border.min.y, x, border.max.y, fill=grid_color)
        for y in lines.horizontal:
            draw.create_line(border.min.x, y, border.max.x, y, fill=grid_color)

        edge_rgba = (200, 200, 200, 100) if dark else (100, 100, 100, 100)
        edge_color = _blend(edge_rgba, background)
        for x in lines.edges_x:
            draw.create_line(x, border.min.y, x, border.max.y, fill=edge_color, width=1.5)
        for y in lines.edges_y:
            draw.create_line(border.min.x, y, border.max.x, y, fill=edge_color, width=1.5)

        origin = picker.origin_point(view)
        if origin is None:
            return
        draw.create_oval(
            origin.x - MARKER_RADIUS,
            origin.y - MARKER_RADIUS,
            origin.x + MARKER_RADIUS,
            origin.y + MARKER_RADIUS,
            fill="red",
            outline="red",
        )
        offset = Vector(10.0, -10.0) if picker.coordinate_system.origin_top_left else Vector(10.0, 10.0)
        label = origin + offset
        draw.create_text(
            label.x, label.y, text="(0, 0)", anchor=tk.SW, fill="white" if dark else "black"
        )

    def _refresh_panels(self) -> None:
        picker = self.picker
        self._zoom_text.set(f"{picker.zoom_percentage()}%")
        self._position_text.set(picker.current_position_text())
        self._raw_text.set(picker.raw_position_text())
        lines = picker.marker_lines()
        if lines != self._shown_lines:
            selected = self._selected_index()
            self._marker_list.delete(0, tk.END)
            for line in lines:
                self._marker_list.insert(tk.END, line)
            if selected is not None and selected < len(lines):
                self._marker_list.selection_set(selected)
            self._shown_lines = lines
        self._copy_all.configure(state="normal" if lines else "disabled")

    # Public actions

    def copy_to_clipboard(self, text: str) -> bool:
        """Put text on the system clipboard; return whether that worked."""
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
        except tk.TclError:
            return False
        return True

    def run(self) -> None:
        """Show the window until it is closed."""
        self.root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the coordinate picker window."""
    args = parse_args(argv)
    window = PickerWindow(args.width, args.height, dark_mode=not args.light)
    window.run()
    return 0