"""
Solidity feature modules
"""
