# -*- coding: utf-8 -*-
"""Built-in translation engines."""
