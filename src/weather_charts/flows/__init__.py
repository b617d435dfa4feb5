"""Prefect flows.

  - render: render_site (samples -> SVG/HTML files in the site directory)
"""
