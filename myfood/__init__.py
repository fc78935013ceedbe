# -*- coding: utf-8 -*-
"""myfood — client for the personal food tracker."""
