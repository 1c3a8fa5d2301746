"""Utilities for todo"""
