"""v1 리소스"""
