"""领域层"""
