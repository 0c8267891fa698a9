# -*- coding: utf-8 -*-
"""Per-tissue statistics of label volumes."""
