# backend/app/services/schema_catalog.py
"""
Descripción estática de la estructura de la base de datos.

No se deriva de los modelos ni del almacén: es un documento escrito a mano
que se publica en GET /schema. Cualquier cambio en app/db/models debe
reflejarse aquí.
"""

from types import MappingProxyType

ESQUEMA_TABLAS = MappingProxyType({
    "aplicaciones": {
        "descripcion": "Aplicaciones de freelancers a proyectos",
        "columnas": {
            "id_aplicacion": "integer (PK, auto)",
            "id_freelancer": "integer (FK -> freelancers)",
            "id_proyecto": "integer (FK -> proyectos)",
            "estado": "varchar (pendiente, aceptado, rechazado)",
            "mensaje_propuesta": "text",
        },
    },
    "clientes": {
        "descripcion": "Clientes que publican proyectos",
        "columnas": {
            "id_cliente": "integer (PK, auto)",
            "nombre": "varchar (NOT NULL)",
            "correo": "varchar (NOT NULL, UNIQUE)",
            "telefono": "varchar",
            "contrasena": "varchar (NOT NULL)",
        },
    },
    "freelancers": {
        "descripcion": "Freelancers disponibles",
        "columnas": {
            "id_freelancer": "integer (PK, auto)",
            "nombre": "varchar (NOT NULL)",
            "telefono": "varchar",
            "correo": "varchar (NOT NULL, UNIQUE)",
            "contrasena": "varchar (NOT NULL)",
            "biografia": "text",
            "fecha_registro": "timestamp (default: NOW())",
        },
    },
    "habilidades": {
        "descripcion": "Catálogo de habilidades",
        "columnas": {
            "id_habilidad": "integer (PK, auto)",
            "nombre": "varchar (NOT NULL)",
        },
    },
    "freelancer_habilidad": {
        "descripcion": "Relación freelancers-habilidades",
        "columnas": {
            "id_freelancer": "integer (PK, FK -> freelancers)",
            "id_habilidad": "integer (PK, FK -> habilidades)",
            "anios_experiencia": "integer",
            "nivel": "varchar (bajo, intermedio, avanzado)",
        },
    },
    "proyectos": {
        "descripcion": "Proyectos publicados por clientes",
        "columnas": {
            "id_proyecto": "integer (PK, auto)",
            "titulo": "varchar (NOT NULL)",
            "descripcion": "text",
            "presupuesto": "numeric",
            "id_cliente": "integer (FK -> clientes)",
            "fecha_publicacion": "timestamp (default: NOW())",
            "estado": "varchar (activo, cerrado, en_progreso)",
        },
    },
})

RUTAS = MappingProxyType({
    "/tablas": "Ver TODA la información de todas las tablas",
    "/schema": "Ver estructura de la base de datos",
    "/clientes": "Listar clientes",
    "/freelancers": "Listar freelancers",
    "/proyectos": "Listar proyectos",
    "/habilidades": "Listar habilidades",
    "/aplicaciones": "Listar aplicaciones",
    "/freelancer-habilidades": "Listar relación freelancer-habilidades",
})
