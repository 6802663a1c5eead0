"""Contract Wizard FastAPI Server"""
from .client import WizardClient

__all__ = ['WizardClient']
