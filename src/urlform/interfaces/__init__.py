"""Contratos que aporta el caller.

El Core nunca construye tipos de parámetro: solo llama a `name`,
`entity_from_string` y `entity` de lo que recibe, así que cualquier objeto con
esa forma sirve (los de `urlform.adapters` o los de la aplicación).
"""
