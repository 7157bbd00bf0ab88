"""
API REST para consultar proyectos de inversión del MEF.

Este paquete expone endpoints REST para obtener los datos financieros de
uno o varios CUIs. Cada consulta ejecuta el pipeline completo:
descarga de la ficha SSI → extracción → registro normalizado.
"""

__version__ = "1.0.0"
