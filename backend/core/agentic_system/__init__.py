"""
Agentic system: intent routing, prompted code generation and the data agents.
"""
