"""Lessons: the interactive notebook cells and their widgets.

Workflow::

    ctx = LessonContext.load("data/walker_lake_proj.csv")

    # Static rendering with explicit widget values
    cells.directional(ctx, azimuth=45)

    # Live widgets in Jupyter
    interactive("directional", ctx)
"""

from variography.lessons import cells
from variography.lessons.cells import LESSONS, interactive
from variography.lessons.context import LessonContext
from variography.lessons.controls import Checkbox, Select, Slider, bind, defaults

__all__ = [
    "cells",
    "LESSONS",
    "interactive",
    "LessonContext",
    "Slider",
    "Checkbox",
    "Select",
    "bind",
    "defaults",
]
