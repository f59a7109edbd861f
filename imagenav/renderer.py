"""Renderer - raylib texture loading and drawing.

Keeps one texture: the one for the entry currently on screen. Switching
entries unloads the previous texture before the new one is uploaded.
"""

from __future__ import annotations
import os
from typing import Optional, Tuple

from .config import BG_COLOR
from .errors import RenderError
from .logging import log
from .rl_compat import (
    rl, c_str, load_image, is_image_valid, is_texture_valid, get_texture_id,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
)
from .surfaces import Renderer
from .types import Entry, TextureInfo
from .view_math import compute_draw_params

MESSAGE_FONT_SIZE = 20


class RaylibRenderer(Renderer):
    """Draws entries into the open raylib window."""

    def __init__(self, bg_color: Tuple[int, int, int] = BG_COLOR):
        self._bg = RL_Color(*bg_color, 255)
        self._tint = RL_Color(255, 255, 255, 255)
        self._text = RL_Color(200, 200, 200, 255)
        self._current: Optional[TextureInfo] = None

    def can_display(self, entry: Entry) -> bool:
        img = load_image(entry.path)
        try:
            return is_image_valid(img)
        finally:
            if img.data != rl.ffi.NULL:
                rl.UnloadImage(img)

    def draw(self, entry: Entry, rotation: float, zoom: float) -> None:
        # A frame is always begun and ended so raylib keeps polling window
        # events even when the entry cannot be drawn.
        error: Optional[RenderError] = None
        rl.BeginDrawing()
        try:
            rl.ClearBackground(self._bg)
            try:
                ti = self._texture_for(entry)
            except RenderError as e:
                error = e
                self._draw_message(f"cannot display {entry.name}")
            else:
                self._draw_texture(ti, rotation, zoom)
        finally:
            rl.EndDrawing()
        if error is not None:
            raise error

    def close(self) -> None:
        self._unload_current()

    def _draw_texture(self, ti: TextureInfo, rotation: float, zoom: float) -> None:
        p = compute_draw_params(ti.w, ti.h, rl.GetScreenWidth(), rl.GetScreenHeight(),
                                rotation, zoom)
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(p.dest_x, p.dest_y, p.dest_w, p.dest_h),
            RL_V2(p.origin_x, p.origin_y), p.angle_deg, self._tint
        )

    def _draw_message(self, text: str) -> None:
        x = max(0, (rl.GetScreenWidth() - rl.MeasureText(c_str(text), MESSAGE_FONT_SIZE)) // 2)
        y = max(0, (rl.GetScreenHeight() - MESSAGE_FONT_SIZE) // 2)
        rl.DrawText(c_str(text), x, y, MESSAGE_FONT_SIZE, self._text)

    def _texture_for(self, entry: Entry) -> TextureInfo:
        path = str(entry.path)
        if self._current is not None and self._current.path == path:
            return self._current
        self._unload_current()

        img = load_image(path)
        if not is_image_valid(img):
            raise RenderError(f"failed to load {os.path.basename(path)}")
        w, h = img.width, img.height
        try:
            tex = rl.LoadTextureFromImage(img)
        finally:
            rl.UnloadImage(img)
        if not is_texture_valid(tex):
            raise RenderError(f"failed to upload texture for {os.path.basename(path)}")

        self._current = TextureInfo(tex=tex, w=w, h=h, path=path)
        log(f"[RENDER] Loaded {os.path.basename(path)} {w}x{h} (id={get_texture_id(tex)})")
        return self._current

    def _unload_current(self) -> None:
        ti, self._current = self._current, None
        if ti is not None and is_texture_valid(ti.tex):
            rl.UnloadTexture(ti.tex)
            log(f"[UNLOAD] Texture id={get_texture_id(ti.tex)}")
