"""
Site to PDF generator: renders web pages to PDF, guided by AI assistant hints.
"""
