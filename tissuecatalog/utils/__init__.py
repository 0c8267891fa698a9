# -*- coding: utf-8 -*-
"""Small helpers shared across the package."""
