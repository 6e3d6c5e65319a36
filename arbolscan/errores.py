# arbolscan/errores.py
# Errores fatales: abortan la ejecución completa.
# Los fallos por entrada o por subárbol se registran con logging y no llegan aquí.


class ArbolScanError(Exception):
    """Error base del paquete."""

    def __init__(self, mensaje: str, ruta: str):
        super().__init__(mensaje)
        self.ruta = ruta


class ErrorAperturaManifiesto(ArbolScanError):
    pass


class ErrorAperturaReporte(ArbolScanError):
    pass


class ErrorCreacionRaiz(ArbolScanError):
    pass
