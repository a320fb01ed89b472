"""Resource API"""
