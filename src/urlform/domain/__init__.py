"""Entradas decodificadas, parámetros tipados y la vista `UrlFormEncoded`."""
