# core/io_worker.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import threading
import traceback

import wx

from core.log import Log

class SaveWorker:
    """
    Single background thread for board saves. GUI stays in wx main thread.

    Saves are coalesced: while one write is running, newer submissions
    replace any pending one, so only the latest snapshot reaches disk.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending = None
        self._t = threading.Thread(target=self._run, name="SaveWorker", daemon=True)
        self._t.start()

    def submit(self, fn, *args, callback=None, **kwargs):
        """Queue a save; callback(result, error) runs on GUI thread via wx.CallAfter."""
        with self._cond:
            if self._pending is not None:
                Log.debug("Superseded a pending save.", 3)
            self._pending = (fn, args, kwargs, callback)
            self._cond.notify()

    def _run(self):
        """Background thread main loop."""
        while True:
            with self._cond:
                while self._pending is None:
                    self._cond.wait()
                fn, args, kwargs, cb = self._pending
                self._pending = None

            result = None
            err = None
            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                err = (e, traceback.format_exc())

            if cb:
                wx.CallAfter(cb, result, err)
            elif err is not None:
                # No callback provided; keep the traceback in the log.
                Log.debug(err[1], 0)
