"""Repository layer: SQL text and DB access helpers over the Gateway.

Keep functions thin and focused, so handlers avoid SQL strings.
Table and column names match the deployed shop schema exactly.
"""
