from .torrent import MediaType, SearchRequest, TorrentResult

__all__ = ["MediaType", "SearchRequest", "TorrentResult"]
