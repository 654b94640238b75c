# beatmap_cloner/__init__.py
