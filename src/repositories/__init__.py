"""데이터 접근 계층"""
