"""
External service integrations
"""
from . import whatsapp

__all__ = ['whatsapp']
