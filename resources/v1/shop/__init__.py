"""shop 리소스"""
