"""
Infrastructure services: device capabilities, outbound links and invoices
"""
