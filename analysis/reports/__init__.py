"""
Report figures and the Markdown regression report
"""
