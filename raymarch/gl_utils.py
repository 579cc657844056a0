"""
Helper functions for OpenGL setup of a 2D, pixel-addressed drawing surface.
"""

from __future__ import annotations
import logging
import OpenGL.GL as gl  # noqa: N811

logger = logging.getLogger(__name__)


def setup_opengl(width: int, height: int) -> None:
    """Viewport, alpha blending and a top-left-origin orthographic projection."""
    gl.glViewport(0, 0, width, height)
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    # y grows downward like pygame surfaces
    gl.glOrtho(0, width, height, 0, -1, 1)
    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()
    logger.debug("OpenGL set up for %dx%d", width, height)


def describe_context() -> str:
    """Vendor/renderer/version string of the current context, for logging."""
    parts = []
    for name in (gl.GL_VENDOR, gl.GL_RENDERER, gl.GL_VERSION):
        value = gl.glGetString(name)
        if isinstance(value, bytes):
            value = value.decode(errors="replace")
        parts.append(str(value))
    return " / ".join(parts)
