"""Thread safety tests for innertext rendering.

Nodes are immutable, renderers keep per-call state only, and configuration
lives in ContextVars. These tests verify that:
1. One tree can be rendered from many threads at once
2. One renderer instance can be shared between threads
3. A config set in one thread does not leak into another

These tests use real threading to catch actual concurrency bugs.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from innertext import to_text
from innertext.builder import h
from innertext.config import TextConfig, get_text_config, text_config_context
from innertext.renderers import InnerTextRenderer
from innertext.whitespace import WhiteSpace

TREE = h(
    "div",
    h("h1", "Title"),
    h("p", "Alpha  bravo\ncharlie"),
    h("table", h("tr", h("td", "1"), h("td", "2")), h("tr", h("td", "3"))),
    h("span", " x  y "),
)
EXPECTED = "Title\n\nAlpha bravo charlie\n\n1\t2\n3 x y "


class TestRenderThreadSafety:
    """Concurrent rendering gives the same result as serial rendering."""

    def test_shared_tree(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: to_text(TREE), range(100)))
        assert results == [EXPECTED] * 100

    def test_shared_renderer(self) -> None:
        renderer = InnerTextRenderer()
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: renderer.render(TREE), range(100)))
        assert set(results) == {EXPECTED}


class TestConfigThreadIsolation:
    """ContextVar config is per thread."""

    def test_config_does_not_leak_between_threads(self) -> None:
        barrier = threading.Barrier(2, timeout=5.0)
        results: dict[str, str] = {}
        errors: list[str] = []

        def render(name: str, whitespace: WhiteSpace) -> None:
            try:
                with text_config_context(TextConfig(whitespace=whitespace)):
                    # Both threads hold their config at the same time
                    barrier.wait()
                    results[name] = to_text(h("span", " x  y "))
                    barrier.wait()
            except Exception as e:
                errors.append(f"{name}: {e}")

        threads = [
            threading.Thread(target=render, args=("normal", WhiteSpace.NORMAL)),
            threading.Thread(target=render, args=("pre", WhiteSpace.PRE)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert not errors, f"Thread errors: {errors}"
        assert results == {"normal": " x y ", "pre": " x  y "}

    def test_worker_config_does_not_reach_caller(self) -> None:
        def render_pre() -> str:
            with text_config_context(TextConfig(whitespace=WhiteSpace.PRE)):
                return to_text(h("span", " x  y "))

        with ThreadPoolExecutor(max_workers=2) as executor:
            assert executor.submit(render_pre).result() == " x  y "
        assert get_text_config().whitespace is WhiteSpace.NORMAL
