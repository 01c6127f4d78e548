"""
Carbon Aegis: GHG emission entry, factor lookup and reporting.
"""
