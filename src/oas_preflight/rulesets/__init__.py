"""Packaged Spectral rulesets"""
