import gc

import pytest
from PyQt6 import sip
from PyQt6.QtWidgets import QApplication


@pytest.fixture(autouse=True)
def _enforce_widget_cleanup():
    """Error if a test leaks simscope.* windows without cleanup.

    Defined first so it tears down last (LIFO), after _flush_qt_events has
    processed deferred events. Only top-level, still-visible widgets from
    simscope.* modules are flagged.
    """
    app = QApplication.instance()
    if app is None:
        yield
        return

    before = set(id(w) for w in app.allWidgets())
    yield

    gc.collect()
    app.processEvents()
    app.processEvents()

    leaked = [
        w for w in app.allWidgets()
        if id(w) not in before
        and w.parent() is None
        and not sip.isdeleted(w)
        and type(w).__module__.startswith("simscope.")
        and w.isVisible()
    ]
    if leaked:
        names = [type(w).__name__ for w in leaked]
        for w in leaked:
            w.close()
            w.deleteLater()
        app.processEvents()
        pytest.fail(
            f"Leaked {len(leaked)} widget(s) without cleanup: {names}. "
            "Add qtbot.addWidget(w) and close/deleteLater/processEvents "
            "in fixture teardown.",
            pytrace=False,
        )


@pytest.fixture(autouse=True)
def _flush_qt_events():
    """Flush deferred Qt events between tests.

    Windows own frame timers and use deleteLater(); draining the queue here
    keeps those from firing during a later test's teardown.
    """
    yield
    app = QApplication.instance()
    if app is None:
        return
    app.processEvents()
    gc.collect()
    app.processEvents()
