import logging
from basesecret.entities import Point, ReconstructionResult, parse_request
from basesecret.errors import InsufficientPoints, InvalidThreshold, SecretSharingError
from basesecret.interpolation import lagrange_at_zero

log = logging.getLogger(__name__)

class SecretReconstructor:
    """Reconstructs Shamir secrets over the integers from base-encoded shares"""

    def __init__(self, threshold: int, total_shares: int = None, logger=None):
        if threshold < 1:
            raise InvalidThreshold(threshold)
        self.threshold = threshold
        self.total_shares = total_shares
        self.log = logger or log

    def decode_shares(self, shares) -> list:
        """Decode shares in order until threshold points are collected"""
        points = []
        for share in shares:
            if len(points) >= self.threshold:
                break
            point = share.to_point()
            points.append(point)
            self.log.debug(
                "Point %d: x=%d, y=%d (base %s: %s)",
                len(points), point.x, point.y, share.base, share.encoded_value
            )
        return points

    def reconstruct(self, points: list) -> int:
        """Recover the secret from the first threshold points"""
        if len(points) < self.threshold:
            raise InsufficientPoints(self.threshold, len(points))

        selected = [Point(*point) for point in points[:self.threshold]]
        self.log.debug("Using first %d decoded points.", len(selected))
        return lagrange_at_zero(selected)

    def recover_secret(self, request) -> ReconstructionResult:
        """Decode a parsed request and reconstruct its secret"""
        points = self.decode_shares(request.shares)
        secret = self.reconstruct(points)
        return ReconstructionResult(
            secret=secret,
            points_used=len(points),
            k=self.threshold,
            n=request.n
        )

def reconstruct(points, k: int) -> int:
    """Lagrange interpolation at x=0 over the first k of the given points"""
    return SecretReconstructor(k).reconstruct(points)

def find_secret(json_data, logger=None) -> dict:
    """
    Solve a JSON request body. Returns the serialised result, or a dict with
    the error message and type when the shares cannot be reconstructed.
    """
    logger = logger or log
    try:
        request = parse_request(json_data)
        logger.info("Total points (n): %d, Points needed (k): %d", request.n, request.k)
        reconstructor = SecretReconstructor(request.k, request.n, logger=logger)
        return reconstructor.recover_secret(request).to_dict()
    except SecretSharingError as e:
        logger.warning("Reconstruction failed: %s", e)
        return {
            "success": False,
            "error": str(e),
            "errorType": type(e).__name__
        }
