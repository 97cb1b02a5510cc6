# -*- coding: utf-8 -*-
"""
LocForge Plugin System

Translation engines live in plugins.built_in and are registered by
core.plugin_manager.PluginManager.
"""
