# -*- coding: utf-8 -*-
"""Plots of tissue palettes, label slices and tissue statistics."""
