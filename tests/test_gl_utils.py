import OpenGL.GL as gl

import raymarch.gl_utils as gu


def test_setup_opengl_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(
        gl,
        "glViewport",
        lambda x, y, w, h: calls.append(("viewport", x, y, w, h)),
    )
    monkeypatch.setattr(
        gl, "glEnable", lambda flag: calls.append(("enable", flag))
    )
    monkeypatch.setattr(
        gl, "glDisable", lambda flag: calls.append(("disable", flag))
    )
    monkeypatch.setattr(
        gl, "glBlendFunc", lambda sf, df: calls.append(("blendfunc", sf, df))
    )
    monkeypatch.setattr(gl, "glMatrixMode", lambda mode: calls.append(("mode", mode)))
    monkeypatch.setattr(gl, "glLoadIdentity", lambda: None)
    monkeypatch.setattr(gl, "glOrtho", lambda *args: calls.append(("ortho",) + args))

    gu.setup_opengl(10, 20)
    assert ("viewport", 0, 0, 10, 20) in calls
    assert ("disable", gl.GL_DEPTH_TEST) in calls
    assert ("enable", gl.GL_BLEND) in calls
    assert ("blendfunc", gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA) in calls
    # Top-left origin: bottom=height, top=0
    assert ("ortho", 0, 10, 20, 0, -1, 1) in calls
    assert calls[-1] == ("mode", gl.GL_MODELVIEW)


def test_describe_context_decodes_bytes(monkeypatch):
    names = {gl.GL_VENDOR: b"Acme", gl.GL_RENDERER: b"Raster", gl.GL_VERSION: b"2.1"}
    monkeypatch.setattr(gl, "glGetString", lambda name: names[name])
    assert gu.describe_context() == "Acme / Raster / 2.1"
