"""
Feature modules: translate user options into contract builder calls
"""
