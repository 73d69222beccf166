"""
The MODEL layer holds the counter store, the scheduler seam and the view model.
It has NO knowledge of widgets; it only uses QtCore (signals, timers, settings).
"""
