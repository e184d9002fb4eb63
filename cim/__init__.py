"""CIM backend: creative idea manager API"""
