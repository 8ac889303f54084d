"""
Content generation building blocks.

Pure pieces of the generation service (classification, prompts, response
cleaning, fallback content) plus the injectable provider client.
"""
