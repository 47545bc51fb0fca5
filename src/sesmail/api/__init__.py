"""Camada API: conectores e payload builders."""
