"""Syntax data package
1) Provides
   - keyword data
   - syntax styling definitions
"""
