"""
Cairo feature modules
"""
