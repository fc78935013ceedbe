# -*- coding: utf-8 -*-
"""Food domain — REST API models and client."""
