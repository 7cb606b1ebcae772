"""Streamlit UI"""
