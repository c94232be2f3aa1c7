# -*- coding: utf-8 -*-
"""Nutrition domain (daily/historical aggregation).

`aggregation` holds the pure computation; `storage` reads a snapshot from the
log store; `service` combines the two behind an async contract for the API.
"""
