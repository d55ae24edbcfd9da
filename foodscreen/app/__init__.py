"""Application composition layer for the Tkinter food screen.

Modules in this package wire views, the view model, the data source and the
Tk-backed timer scheduler into a runnable window without placing data logic
in views.
"""
