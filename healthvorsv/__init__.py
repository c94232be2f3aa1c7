# -*- coding: utf-8 -*-
"""HealthVorsv — diet/fitness tracking backend (foods, water, weight, goals)."""
