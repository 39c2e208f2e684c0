"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-12

Description:
Tool interattivo di provisioning per desktop Fedora.
============================================================
"""

__version__ = "1.0.0"
