"""
The yt-dlp option catalog.

Scope
- CATALOG maps every builder method name to its declaration (Flag, Option or
  Cardinal). The builder generates one method per entry; nothing about a single
  option is hardcoded anywhere else.
- Closed enumerations used by the declarations are exported as tuples so that
  hosts can offer the same choices in their own interfaces.

Conventions
- Method names are the yt-dlp long option names in snake_case, except where the
  flag is plural but the method configures one value (js_runtime -> --js-runtimes,
  remote_component -> --remote-components) and continue_ (a Python keyword).
- Options are single-use unless marked repeatable=True; yt-dlp accepts repeated
  occurrences of exactly those.
- Groups follow the section names of yt-dlp's own --help output.
- Open sets (audio formats, downloader names, SponsorBlock categories,
  post-processor names) accept any non-empty string and are not enforced here.
"""
from types import MappingProxyType

from .arguments import *
from .converters import *


# --- closed enumerations ---

JS_RUNTIMES = ("deno", "node", "quickjs", "bun")

COOKIE_BROWSERS = ("brave", "chrome", "chromium", "edge", "firefox", "opera", "safari", "vivaldi", "whale")

KEYRINGS = ("basictext", "gnomekeyring", "kwallet", "kwallet5", "kwallet6")

RELEASE_CHANNELS = ("stable", "nightly", "master")

REMOTE_COMPONENTS = ("ejs:npm", "ejs:github")

RETRY_TYPES = ("http", "fragment", "file_access", "extractor")

DOWNLOADER_PROTOCOLS = ("http", "ftp", "m3u8", "dash", "rstp", "rtmp", "mms")

PATH_TYPES = (
    "home",
    "temp",
    "subtitle",
    "thumbnail",
    "description",
    "annotation",
    "infojson",
    "link",
    "pl_thumbnail",
    "pl_description",
    "pl_infojson",
    "chapter",
    "pl_video",
)

PRINT_WHEN = (
    "video",
    "pre_process",
    "after_filter",
    "before_dl",
    "post_process",
    "after_move",
    "after_video",
    "playlist",
    "after_playlist",
)

PROGRESS_TEMPLATE_TYPES = ("download", "download-title", "postprocess", "postprocess-title")

POSTPROCESSOR_WHEN = (
    "pre_process",
    "after_filter",
    "video",
    "before_dl",
    "post_process",
    "after_move",
    "after_video",
    "playlist",
)

COLOR_POLICIES = ("always", "auto", "never", "no_color", "auto-tty", "no_color-tty")

COLOR_STREAMS = ("stdout", "stderr")

PRESET_ALIASES = ("mp3", "aac", "mp4", "mkv", "sleep")

CONCAT_POLICIES = ("never", "always", "multi_video")

FIXUP_POLICIES = ("never", "warn", "detect_or_warn", "force")

SUBTITLE_CONVERSIONS = ("ass", "lrc", "srt", "vtt", "none")


# --- groups ---

GENERAL = "general"
NETWORK = "network"
GEO = "geo-restriction"
SELECTION = "video selection"
DOWNLOAD = "download"
FILESYSTEM = "filesystem"
THUMBNAIL = "thumbnail"
SHORTCUT = "internet shortcut"
VERBOSITY = "verbosity and simulation"
WORKAROUNDS = "workarounds"
FORMAT = "video format"
SUBTITLE = "subtitle"
AUTHENTICATION = "authentication"
POSTPROCESSING = "post-processing"
SPONSORBLOCK = "sponsorblock"
EXTRACTOR = "extractor"

GROUPS = (
    GENERAL,
    NETWORK,
    GEO,
    SELECTION,
    DOWNLOAD,
    FILESYSTEM,
    THUMBNAIL,
    SHORTCUT,
    VERBOSITY,
    WORKAROUNDS,
    FORMAT,
    SUBTITLE,
    AUTHENTICATION,
    POSTPROCESSING,
    SPONSORBLOCK,
    EXTRACTOR,
)

_natural = number()
_integer = number(integral=True)
_positive = number(integral=True, minimum=1)


CATALOG = MappingProxyType({
    # --- general ---
    "help": Flag("--help", group=GENERAL, descr="print the help text and exit"),
    "version": Flag("--version", group=GENERAL, descr="print the program version and exit"),
    "update": Flag("--update", group=GENERAL, descr="update yt-dlp to the latest release"),
    "no_update": Flag("--no-update", group=GENERAL, descr="do not check for updates"),
    "update_to": Option(
        "--update-to",
        Param("channel", default="stable", choices=RELEASE_CHANNELS),
        Param("tag", default="latest"),
        layout=(Join("channel", ("@", "tag")),),
        group=GENERAL,
        descr="upgrade or downgrade to a release channel and tag (CHANNEL@TAG)",
    ),
    "url": Cardinal(Param("url", descr="video, playlist or channel URL"), group=GENERAL, descr="source to download"),
    "ignore_errors": Flag("--ignore-errors", group=GENERAL, descr="ignore download and postprocessing errors"),
    "no_abort_on_error": Flag("--no-abort-on-error", group=GENERAL, descr="continue with the next video on download errors"),
    "abort_on_error": Flag("--abort-on-error", group=GENERAL, descr="abort downloading further videos on an error"),
    "list_extractors": Flag("--list-extractors", group=GENERAL, descr="list all supported extractors and exit"),
    "extractor_descriptions": Flag("--extractor-descriptions", group=GENERAL, descr="describe all supported extractors and exit"),
    "use_extractors": Option(
        "--use-extractors",
        Param("extractors", kind=listing),
        repeatable=True,
        group=GENERAL,
        descr="extractor names to use, comma separated",
    ),
    "default_search": Option("--default-search", Param("prefix"), group=GENERAL, descr="search prefix for unqualified URLs"),
    "ignore_config": Flag("--ignore-config", group=GENERAL, descr="do not load any further configuration files"),
    "no_config_locations": Flag("--no-config-locations", group=GENERAL, descr="do not load custom configuration files"),
    "config_locations": Option(
        "--config-locations",
        Param("path"),
        repeatable=True,
        group=GENERAL,
        descr="location of a main configuration file",
    ),
    "plugin_dirs": Option(
        "--plugin-dirs",
        Param("dir", default="default"),
        repeatable=True,
        group=GENERAL,
        descr="directory to search for plugins",
    ),
    "no_plugin_dirs": Flag("--no-plugin-dirs", group=GENERAL, descr="clear plugin directories, including defaults"),
    "js_runtime": Option(
        "--js-runtimes",
        Param("runtime", choices=JS_RUNTIMES),
        Param("path", default=None),
        layout=(Join("runtime", (":", "path")),),
        repeatable=True,
        group=GENERAL,
        descr="enable a JavaScript runtime (RUNTIME[:PATH])",
    ),
    "no_js_runtimes": Flag("--no-js-runtimes", group=GENERAL, descr="clear enabled JavaScript runtimes"),
    "remote_component": Option(
        "--remote-components",
        Param("component", choices=REMOTE_COMPONENTS),
        repeatable=True,
        group=GENERAL,
        descr="remote component allowed to be fetched",
    ),
    "no_remote_components": Flag("--no-remote-components", group=GENERAL, descr="disallow fetching remote components"),
    "flat_playlist": Flag("--flat-playlist", group=GENERAL, descr="list playlist entries without extracting them"),
    "no_flat_playlist": Flag("--no-flat-playlist", group=GENERAL, descr="fully extract playlist videos"),
    "live_from_start": Flag("--live-from-start", group=GENERAL, descr="download livestreams from the start"),
    "no_live_from_start": Flag("--no-live-from-start", group=GENERAL, descr="download livestreams from the current time"),
    "wait_for_video": Option(
        "--wait-for-video",
        Param("wait", kind=span),
        group=GENERAL,
        descr="wait for scheduled streams (SECONDS or MIN-MAX)",
    ),
    "no_wait_for_video": Flag("--no-wait-for-video", group=GENERAL, descr="do not wait for scheduled streams"),
    "mark_watched": Flag("--mark-watched", group=GENERAL, descr="mark videos watched"),
    "no_mark_watched": Flag("--no-mark-watched", group=GENERAL, descr="do not mark videos watched"),
    "color": Option(
        "--color",
        Param("policy", choices=COLOR_POLICIES),
        Param("stream", default=None, choices=COLOR_STREAMS),
        layout=(Join("stream", (":", "policy")),),
        repeatable=True,
        group=GENERAL,
        descr="whether to emit color codes ([STREAM:]POLICY)",
    ),
    "alias": Option(
        "--alias",
        Param("aliases", kind=listing),
        Param("options"),
        repeatable=True,
        group=GENERAL,
        descr="create option aliases expanding to the given options",
    ),
    "preset_alias": Option(
        "--preset-alias",
        Param("preset", choices=PRESET_ALIASES),
        repeatable=True,
        group=GENERAL,
        descr="apply a predefined set of options",
    ),

    # --- network ---
    "proxy": Option("--proxy", Param("url", kind=verbatim), group=NETWORK, descr="HTTP/HTTPS/SOCKS proxy; empty for a direct connection"),
    "socket_timeout": Option("--socket-timeout", Param("seconds", kind=_natural), group=NETWORK, descr="seconds to wait before giving up"),
    "source_address": Option("--source-address", Param("ip"), group=NETWORK, descr="client-side IP address to bind to"),
    "impersonate": Option("--impersonate", Param("client", kind=verbatim), group=NETWORK, descr="client to impersonate; empty for any"),
    "list_impersonate_targets": Flag("--list-impersonate-targets", group=NETWORK, descr="list available impersonation targets"),
    "force_ipv4": Flag("--force-ipv4", group=NETWORK, descr="make all connections via IPv4"),
    "force_ipv6": Flag("--force-ipv6", group=NETWORK, descr="make all connections via IPv6"),
    "enable_file_urls": Flag("--enable-file-urls", group=NETWORK, descr="enable file:// URLs"),

    # --- geo-restriction ---
    "geo_verification_proxy": Option(
        "--geo-verification-proxy",
        Param("url", kind=verbatim),
        group=GEO,
        descr="proxy used to verify the IP address of geo-restricted sites",
    ),
    "xff": Option("--xff", Param("value"), group=GEO, descr="X-Forwarded-For header (default, never, country code or IP block)"),

    # --- video selection ---
    "playlist_items": Option("--playlist-items", Param("item_spec"), group=SELECTION, descr="comma separated playlist indices to download"),
    "min_filesize": Option("--min-filesize", Param("size"), group=SELECTION, descr="abort downloads smaller than SIZE"),
    "max_filesize": Option("--max-filesize", Param("size"), group=SELECTION, descr="abort downloads larger than SIZE"),
    "date": Option("--date", Param("date"), group=SELECTION, descr="download only videos uploaded on this date"),
    "date_before": Option("--datebefore", Param("date"), group=SELECTION, descr="download only videos uploaded on or before this date"),
    "date_after": Option("--dateafter", Param("date"), group=SELECTION, descr="download only videos uploaded on or after this date"),
    "match_filters": Option(
        "--match-filters",
        Param("filter"),
        repeatable=True,
        group=SELECTION,
        descr="generic video filter",
    ),
    "no_match_filters": Flag("--no-match-filters", group=SELECTION, descr="do not use any match filter"),
    "break_match_filters": Option(
        "--break-match-filters",
        Param("filter"),
        repeatable=True,
        group=SELECTION,
        descr="stop the download process when a video is rejected",
    ),
    "no_break_match_filters": Flag("--no-break-match-filters", group=SELECTION, descr="do not use any break match filter"),
    "no_playlist": Flag("--no-playlist", group=SELECTION, descr="download only the video when the URL refers to both"),
    "yes_playlist": Flag("--yes-playlist", group=SELECTION, descr="download the playlist when the URL refers to both"),
    "age_limit": Option("--age-limit", Param("years", kind=_natural), group=SELECTION, descr="download only videos suitable for the given age"),
    "download_archive": Option("--download-archive", Param("file"), group=SELECTION, descr="record downloaded video ids in FILE"),
    "no_download_archive": Flag("--no-download-archive", group=SELECTION, descr="do not use an archive file"),
    "max_downloads": Option("--max-downloads", Param("number", kind=_natural), group=SELECTION, descr="abort after downloading NUMBER files"),
    "break_on_existing": Flag("--break-on-existing", group=SELECTION, descr="stop when encountering an archived file"),
    "no_break_on_existing": Flag("--no-break-on-existing", group=SELECTION, descr="do not stop on archived files"),
    "break_per_input": Flag("--break-per-input", group=SELECTION, descr="reset break conditions per input URL"),
    "no_break_per_input": Flag("--no-break-per-input", group=SELECTION, descr="break conditions abort the entire queue"),
    "skip_playlist_after_errors": Option(
        "--skip-playlist-after-errors",
        Param("count", kind=_natural),
        group=SELECTION,
        descr="number of allowed failures until the rest of the playlist is skipped",
    ),

    # --- download ---
    "concurrent_fragments": Option(
        "--concurrent-fragments",
        Param("n", kind=_positive, default=1),
        group=DOWNLOAD,
        descr="number of fragments to download concurrently",
    ),
    "limit_rate": Option("--limit-rate", Param("rate"), group=DOWNLOAD, descr="maximum download rate in bytes per second"),
    "throttled_rate": Option("--throttled-rate", Param("rate"), group=DOWNLOAD, descr="minimum rate below which throttling is assumed"),
    "retries": Option(
        "--retries",
        Param("retries", kind=limit(), default=10),
        group=DOWNLOAD,
        descr="number of retries, or \"infinite\"",
    ),
    "file_access_retries": Option(
        "--file-access-retries",
        Param("retries", kind=limit(integral=True), default=3),
        group=DOWNLOAD,
        descr="number of retries on file access errors, or \"infinite\"",
    ),
    "fragment_retries": Option(
        "--fragment-retries",
        Param("retries", kind=limit(integral=True), default=10),
        group=DOWNLOAD,
        descr="number of retries for a fragment, or \"infinite\"",
    ),
    "retry_sleep": Option(
        "--retry-sleep",
        Param("expr", kind=scalar),
        Param("type", default=None, choices=RETRY_TYPES),
        layout=(Join("type", (":", "expr")),),
        repeatable=True,
        group=DOWNLOAD,
        descr="time to sleep between retries ([TYPE:]EXPR)",
    ),
    "skip_unavailable_fragments": Flag("--skip-unavailable-fragments", group=DOWNLOAD, descr="skip unavailable fragments"),
    "abort_on_unavailable_fragments": Flag("--abort-on-unavailable-fragments", group=DOWNLOAD, descr="abort when a fragment is unavailable"),
    "keep_fragments": Flag("--keep-fragments", group=DOWNLOAD, descr="keep fragments on disk after downloading"),
    "no_keep_fragments": Flag("--no-keep-fragments", group=DOWNLOAD, descr="delete fragments after downloading"),
    "buffer_size": Option("--buffer-size", Param("size", kind=scalar), group=DOWNLOAD, descr="size of the download buffer"),
    "resize_buffer": Flag("--resize-buffer", group=DOWNLOAD, descr="automatically resize the buffer"),
    "no_resize_buffer": Flag("--no-resize-buffer", group=DOWNLOAD, descr="do not resize the buffer"),
    "http_chunk_size": Option("--http-chunk-size", Param("size", kind=scalar), group=DOWNLOAD, descr="size of a chunk for chunk-based HTTP downloading"),
    "playlist_random": Flag("--playlist-random", group=DOWNLOAD, descr="download playlist videos in random order"),
    "lazy_playlist": Flag("--lazy-playlist", group=DOWNLOAD, descr="process playlist entries as they are received"),
    "no_lazy_playlist": Flag("--no-lazy-playlist", group=DOWNLOAD, descr="process playlist entries after the whole playlist is parsed"),
    "hls_use_mpegts": Flag("--hls-use-mpegts", group=DOWNLOAD, descr="use the mpegts container for HLS videos"),
    "no_hls_use_mpegts": Flag("--no-hls-use-mpegts", group=DOWNLOAD, descr="do not use the mpegts container for HLS videos"),
    "download_sections": Option(
        "--download-sections",
        Param("regex"),
        repeatable=True,
        group=DOWNLOAD,
        descr="download only chapters matching the regex or time ranges",
    ),
    "downloader": Option(
        "--downloader",
        Param("name"),
        Param("protocols", kind=listing, default=None, choices=DOWNLOADER_PROTOCOLS),
        layout=(Join("protocols", (":", "name")),),
        repeatable=True,
        group=DOWNLOAD,
        descr="external downloader to use ([PROTOCOLS:]NAME)",
    ),
    "downloader_args": Option(
        "--downloader-args",
        Param("name"),
        Param("args"),
        layout=(Join("name", (":", "args")),),
        repeatable=True,
        group=DOWNLOAD,
        descr="arguments passed to an external downloader (NAME:ARGS)",
    ),

    # --- filesystem ---
    "batch_file": Option("--batch-file", Param("file"), group=FILESYSTEM, descr="file containing URLs to download"),
    "no_batch_file": Flag("--no-batch-file", group=FILESYSTEM, descr="do not read URLs from a batch file"),
    "paths": Option(
        "--paths",
        Param("path"),
        Param("type", default=None, choices=PATH_TYPES),
        layout=(Join("type", (":", "path")),),
        repeatable=True,
        group=FILESYSTEM,
        descr="paths where files should be downloaded ([TYPE:]PATH)",
    ),
    "output": Option(
        "--output",
        Param("template"),
        Param("type", default=None, choices=PATH_TYPES),
        layout=(Join("type", (":", "template")),),
        repeatable=True,
        group=FILESYSTEM,
        descr="output filename template ([TYPE:]TEMPLATE)",
    ),
    "output_na_placeholder": Option(
        "--output-na-placeholder",
        Param("text", kind=verbatim, default="NA"),
        group=FILESYSTEM,
        descr="placeholder for unavailable template fields",
    ),
    "restrict_filenames": Flag("--restrict-filenames", group=FILESYSTEM, descr="restrict filenames to ASCII characters"),
    "no_restrict_filenames": Flag("--no-restrict-filenames", group=FILESYSTEM, descr="allow unicode characters in filenames"),
    "windows_filenames": Flag("--windows-filenames", group=FILESYSTEM, descr="force filenames to be Windows-compatible"),
    "no_windows_filenames": Flag("--no-windows-filenames", group=FILESYSTEM, descr="sanitize filenames only minimally"),
    "trim_filenames": Option("--trim-filenames", Param("length", kind=_positive), group=FILESYSTEM, descr="limit the filename length"),
    "no_overwrites": Flag("--no-overwrites", group=FILESYSTEM, descr="do not overwrite any files"),
    "force_overwrites": Flag("--force-overwrites", group=FILESYSTEM, descr="overwrite all video and metadata files"),
    "no_force_overwrites": Flag("--no-force-overwrites", group=FILESYSTEM, descr="do not overwrite the video, only related files"),
    "continue_": Flag("--continue", group=FILESYSTEM, descr="resume partially downloaded files"),
    "no_continue": Flag("--no-continue", group=FILESYSTEM, descr="restart partially downloaded files from the beginning"),
    "part": Flag("--part", group=FILESYSTEM, descr="use .part files"),
    "no_part": Flag("--no-part", group=FILESYSTEM, descr="write directly into the output file"),
    "mtime": Flag("--mtime", group=FILESYSTEM, descr="use the Last-modified header for the file time"),
    "no_mtime": Flag("--no-mtime", group=FILESYSTEM, descr="do not use the Last-modified header"),
    "write_description": Flag("--write-description", group=FILESYSTEM, descr="write the video description to a .description file"),
    "no_write_description": Flag("--no-write-description", group=FILESYSTEM, descr="do not write the video description"),
    "write_info_json": Flag("--write-info-json", group=FILESYSTEM, descr="write video metadata to a .info.json file"),
    "no_write_info_json": Flag("--no-write-info-json", group=FILESYSTEM, descr="do not write video metadata"),
    "write_playlist_metafiles": Flag("--write-playlist-metafiles", group=FILESYSTEM, descr="write playlist metadata in addition to video metadata"),
    "no_write_playlist_metafiles": Flag("--no-write-playlist-metafiles", group=FILESYSTEM, descr="do not write playlist metadata"),
    "clean_info_json": Flag("--clean-info-json", group=FILESYSTEM, descr="remove internal metadata from the infojson"),
    "no_clean_info_json": Flag("--no-clean-info-json", group=FILESYSTEM, descr="write all fields to the infojson"),
    "write_comments": Flag("--write-comments", group=FILESYSTEM, descr="retrieve video comments into the infojson"),
    "no_write_comments": Flag("--no-write-comments", group=FILESYSTEM, descr="do not retrieve video comments"),
    "load_info_json": Option("--load-info-json", Param("file"), group=FILESYSTEM, descr="JSON file containing the video information"),
    "cookies": Option("--cookies", Param("file"), group=FILESYSTEM, descr="Netscape formatted file to read and dump cookies"),
    "no_cookies": Flag("--no-cookies", group=FILESYSTEM, descr="do not read or dump cookies"),
    "cookies_from_browser": Option(
        "--cookies-from-browser",
        Param("browser", choices=COOKIE_BROWSERS),
        Param("keyring", default=None, choices=KEYRINGS),
        Param("profile", default=None),
        Param("container", default=None),
        layout=(Join("browser", ("+", "keyring"), (":", "profile"), ("::", "container")),),
        group=FILESYSTEM,
        descr="load cookies from a browser (BROWSER[+KEYRING][:PROFILE][::CONTAINER])",
    ),
    "no_cookies_from_browser": Flag("--no-cookies-from-browser", group=FILESYSTEM, descr="do not load cookies from a browser"),
    "cache_dir": Option("--cache-dir", Param("dir"), group=FILESYSTEM, descr="location of the cache directory"),
    "no_cache_dir": Flag("--no-cache-dir", group=FILESYSTEM, descr="disable filesystem caching"),
    "rm_cache_dir": Flag("--rm-cache-dir", group=FILESYSTEM, descr="delete all filesystem cache files"),

    # --- thumbnail ---
    "write_thumbnail": Flag("--write-thumbnail", group=THUMBNAIL, descr="write the thumbnail image to disk"),
    "no_write_thumbnail": Flag("--no-write-thumbnail", group=THUMBNAIL, descr="do not write the thumbnail image"),
    "write_all_thumbnails": Flag("--write-all-thumbnails", group=THUMBNAIL, descr="write all thumbnail formats to disk"),
    "list_thumbnails": Flag("--list-thumbnails", group=THUMBNAIL, descr="list available thumbnails and exit"),

    # --- internet shortcut ---
    "write_link": Flag("--write-link", group=SHORTCUT, descr="write an internet shortcut file for the platform"),
    "write_url_link": Flag("--write-url-link", group=SHORTCUT, descr="write a .url Windows shortcut"),
    "write_webloc_link": Flag("--write-webloc-link", group=SHORTCUT, descr="write a .webloc macOS shortcut"),
    "write_desktop_link": Flag("--write-desktop-link", group=SHORTCUT, descr="write a .desktop Linux shortcut"),

    # --- verbosity and simulation ---
    "quiet": Flag("--quiet", group=VERBOSITY, descr="activate quiet mode"),
    "no_quiet": Flag("--no-quiet", group=VERBOSITY, descr="deactivate quiet mode"),
    "no_warnings": Flag("--no-warnings", group=VERBOSITY, descr="ignore warnings"),
    "simulate": Flag("--simulate", group=VERBOSITY, descr="do not download or write anything to disk"),
    "no_simulate": Flag("--no-simulate", group=VERBOSITY, descr="download even when listing or printing"),
    "ignore_no_formats_error": Flag("--ignore-no-formats-error", group=VERBOSITY, descr="ignore \"no video formats\" errors"),
    "no_ignore_no_formats_error": Flag("--no-ignore-no-formats-error", group=VERBOSITY, descr="fail on \"no video formats\" errors"),
    "skip_download": Flag("--skip-download", group=VERBOSITY, descr="do not download the video but write related files"),
    "print": Option(
        "--print",
        Param("template"),
        Param("when", default=None, choices=PRINT_WHEN),
        layout=(Join("when", (":", "template")),),
        repeatable=True,
        group=VERBOSITY,
        descr="field name or output template to print ([WHEN:]TEMPLATE)",
    ),
    "print_to_file": Option(
        "--print-to-file",
        Param("template"),
        Param("file"),
        Param("when", default=None, choices=PRINT_WHEN),
        layout=(Join("when", (":", "template")), "file"),
        repeatable=True,
        group=VERBOSITY,
        descr="append the given template to a file ([WHEN:]TEMPLATE FILE)",
    ),
    "dump_json": Flag("--dump-json", group=VERBOSITY, descr="print JSON information for each video"),
    "dump_single_json": Flag("--dump-single-json", group=VERBOSITY, descr="print JSON information for each URL"),
    "force_write_archive": Flag("--force-write-archive", group=VERBOSITY, descr="write to the archive even when simulating"),
    "newline": Flag("--newline", group=VERBOSITY, descr="print the progress bar as new lines"),
    "no_progress": Flag("--no-progress", group=VERBOSITY, descr="do not print the progress bar"),
    "progress": Flag("--progress", group=VERBOSITY, descr="show the progress bar even in quiet mode"),
    "console_title": Flag("--console-title", group=VERBOSITY, descr="display progress in the console titlebar"),
    "progress_template": Option(
        "--progress-template",
        Param("template"),
        Param("type", default=None, choices=PROGRESS_TEMPLATE_TYPES),
        layout=(Join("type", (":", "template")),),
        repeatable=True,
        group=VERBOSITY,
        descr="template for progress outputs ([TYPE:]TEMPLATE)",
    ),
    "progress_delta": Option(
        "--progress-delta",
        Param("seconds", kind=_natural, default=0),
        group=VERBOSITY,
        descr="time between progress output",
    ),
    "verbose": Flag("--verbose", group=VERBOSITY, descr="print various debugging information"),
    "dump_pages": Flag("--dump-pages", group=VERBOSITY, descr="print downloaded pages encoded using base64"),
    "write_pages": Flag("--write-pages", group=VERBOSITY, descr="write downloaded intermediary pages to files"),
    "print_traffic": Flag("--print-traffic", group=VERBOSITY, descr="display sent and read HTTP traffic"),

    # --- workarounds ---
    "encoding": Option("--encoding", Param("encoding"), group=WORKAROUNDS, descr="force the specified encoding"),
    "legacy_server_connect": Flag("--legacy-server-connect", group=WORKAROUNDS, descr="allow legacy TLS renegotiation"),
    "no_check_certificates": Flag("--no-check-certificates", group=WORKAROUNDS, descr="suppress HTTPS certificate validation"),
    "prefer_insecure": Flag("--prefer-insecure", group=WORKAROUNDS, descr="use an unencrypted connection when possible"),
    "add_headers": Option(
        "--add-headers",
        Param("field"),
        Param("value"),
        layout=(Join("field", (":", "value")),),
        repeatable=True,
        group=WORKAROUNDS,
        descr="custom HTTP header (FIELD:VALUE)",
    ),
    "bidi_workaround": Flag("--bidi-workaround", group=WORKAROUNDS, descr="work around terminals lacking bidirectional text support"),
    "sleep_requests": Option("--sleep-requests", Param("seconds", kind=_natural), group=WORKAROUNDS, descr="seconds to sleep between requests"),
    "sleep_interval": Option("--sleep-interval", Param("seconds", kind=_natural), group=WORKAROUNDS, descr="seconds to sleep before each download"),
    "max_sleep_interval": Option("--max-sleep-interval", Param("seconds", kind=_natural), group=WORKAROUNDS, descr="upper bound of a randomized sleep"),
    "sleep_subtitles": Option("--sleep-subtitles", Param("seconds", kind=_natural), group=WORKAROUNDS, descr="seconds to sleep before each subtitle download"),

    # --- video format ---
    "format": Option("--format", Param("format"), group=FORMAT, descr="video format code"),
    "format_sort": Option("--format-sort", Param("sort_order"), group=FORMAT, descr="sort the formats by the given fields"),
    "format_sort_force": Flag("--format-sort-force", group=FORMAT, descr="force user specified sort order"),
    "no_format_sort_force": Flag("--no-format-sort-force", group=FORMAT, descr="prefer extractor specified sort order"),
    "video_multistreams": Flag("--video-multistreams", group=FORMAT, descr="allow multiple video streams to be merged"),
    "no_video_multistreams": Flag("--no-video-multistreams", group=FORMAT, descr="merge only one video stream"),
    "audio_multistreams": Flag("--audio-multistreams", group=FORMAT, descr="allow multiple audio streams to be merged"),
    "no_audio_multistreams": Flag("--no-audio-multistreams", group=FORMAT, descr="merge only one audio stream"),
    "prefer_free_formats": Flag("--prefer-free-formats", group=FORMAT, descr="prefer free container formats"),
    "no_prefer_free_formats": Flag("--no-prefer-free-formats", group=FORMAT, descr="do not prefer free container formats"),
    "check_formats": Flag("--check-formats", group=FORMAT, descr="check that the selected formats are downloadable"),
    "check_all_formats": Flag("--check-all-formats", group=FORMAT, descr="check all formats for whether they are downloadable"),
    "no_check_formats": Flag("--no-check-formats", group=FORMAT, descr="do not check that the formats are downloadable"),
    "list_formats": Flag("--list-formats", group=FORMAT, descr="list available formats and exit"),
    "merge_output_format": Option("--merge-output-format", Param("format"), group=FORMAT, descr="containers that may be used when merging formats"),

    # --- subtitle ---
    "write_subs": Flag("--write-subs", group=SUBTITLE, descr="write subtitle files"),
    "no_write_subs": Flag("--no-write-subs", group=SUBTITLE, descr="do not write subtitle files"),
    "write_auto_subs": Flag("--write-auto-subs", group=SUBTITLE, descr="write automatically generated subtitle files"),
    "no_write_auto_subs": Flag("--no-write-auto-subs", group=SUBTITLE, descr="do not write automatically generated subtitles"),
    "list_subs": Flag("--list-subs", group=SUBTITLE, descr="list available subtitles and exit"),
    "sub_format": Option("--sub-format", Param("format"), group=SUBTITLE, descr="subtitle format preference"),
    "sub_langs": Option("--sub-langs", Param("langs"), group=SUBTITLE, descr="languages of the subtitles to download"),

    # --- authentication ---
    "username": Option("--username", Param("username"), group=AUTHENTICATION, descr="login with this account ID"),
    "password": Option("--password", Param("password"), group=AUTHENTICATION, descr="account password"),
    "twofactor": Option("--twofactor", Param("code", kind=scalar), group=AUTHENTICATION, descr="two-factor authentication code"),
    "netrc": Flag("--netrc", group=AUTHENTICATION, descr="use .netrc authentication data"),
    "netrc_location": Option("--netrc-location", Param("path"), group=AUTHENTICATION, descr="location of the .netrc file"),
    "netrc_cmd": Option("--netrc-cmd", Param("cmd"), group=AUTHENTICATION, descr="command to execute to get credentials"),
    "video_password": Option("--video-password", Param("password"), group=AUTHENTICATION, descr="video-specific password"),
    "ap_mso": Option("--ap-mso", Param("mso"), group=AUTHENTICATION, descr="Adobe Pass multiple-system operator identifier"),
    "ap_username": Option("--ap-username", Param("username"), group=AUTHENTICATION, descr="multiple-system operator account login"),
    "ap_password": Option("--ap-password", Param("password"), group=AUTHENTICATION, descr="multiple-system operator account password"),
    "ap_list_mso": Flag("--ap-list-mso", group=AUTHENTICATION, descr="list supported multiple-system operators"),
    "client_certificate": Option("--client-certificate", Param("certfile"), group=AUTHENTICATION, descr="path to the client certificate file"),
    "client_certificate_key": Option("--client-certificate-key", Param("keyfile"), group=AUTHENTICATION, descr="path to the client certificate private key"),
    "client_certificate_password": Option(
        "--client-certificate-password",
        Param("password"),
        group=AUTHENTICATION,
        descr="password for the client certificate private key",
    ),

    # --- post-processing ---
    "extract_audio": Flag("--extract-audio", group=POSTPROCESSING, descr="convert video files to audio-only files"),
    "audio_format": Option("--audio-format", Param("format", default="best"), group=POSTPROCESSING, descr="audio format to convert to"),
    "audio_quality": Option("--audio-quality", Param("quality", kind=scalar, default=5), group=POSTPROCESSING, descr="audio quality (0 best, 10 worst) or bitrate"),
    "remux_video": Option("--remux-video", Param("format"), group=POSTPROCESSING, descr="remux the video into another container"),
    "recode_video": Option("--recode-video", Param("format"), group=POSTPROCESSING, descr="re-encode the video into another format"),
    "postprocessor_args": Option(
        "--postprocessor-args",
        Param("name"),
        Param("args"),
        layout=(Join("name", (":", "args")),),
        repeatable=True,
        group=POSTPROCESSING,
        descr="arguments passed to a post-processor (NAME:ARGS)",
    ),
    "keep_video": Flag("--keep-video", group=POSTPROCESSING, descr="keep the intermediate video file"),
    "no_keep_video": Flag("--no-keep-video", group=POSTPROCESSING, descr="delete the intermediate video file"),
    "post_overwrites": Flag("--post-overwrites", group=POSTPROCESSING, descr="overwrite post-processed files"),
    "no_post_overwrites": Flag("--no-post-overwrites", group=POSTPROCESSING, descr="do not overwrite post-processed files"),
    "embed_subs": Flag("--embed-subs", group=POSTPROCESSING, descr="embed subtitles in the video"),
    "no_embed_subs": Flag("--no-embed-subs", group=POSTPROCESSING, descr="do not embed subtitles"),
    "embed_thumbnail": Flag("--embed-thumbnail", group=POSTPROCESSING, descr="embed the thumbnail as cover art"),
    "no_embed_thumbnail": Flag("--no-embed-thumbnail", group=POSTPROCESSING, descr="do not embed the thumbnail"),
    "embed_metadata": Flag("--embed-metadata", group=POSTPROCESSING, descr="embed metadata in the video file"),
    "no_embed_metadata": Flag("--no-embed-metadata", group=POSTPROCESSING, descr="do not embed metadata"),
    "embed_chapters": Flag("--embed-chapters", group=POSTPROCESSING, descr="add chapter markers to the video file"),
    "no_embed_chapters": Flag("--no-embed-chapters", group=POSTPROCESSING, descr="do not add chapter markers"),
    "embed_info_json": Flag("--embed-info-json", group=POSTPROCESSING, descr="embed the infojson as an attachment"),
    "no_embed_info_json": Flag("--no-embed-info-json", group=POSTPROCESSING, descr="do not embed the infojson"),
    "parse_metadata": Option(
        "--parse-metadata",
        Param("from_to"),
        Param("when", default="pre_process", choices=POSTPROCESSOR_WHEN),
        layout=(Join("when", (":", "from_to")),),
        repeatable=True,
        group=POSTPROCESSING,
        descr="parse additional metadata from other fields ([WHEN:]FROM:TO)",
    ),
    "replace_in_metadata": Option(
        "--replace-in-metadata",
        Param("fields"),
        Param("regex"),
        Param("replace", kind=verbatim),
        Param("when", default="pre_process", choices=POSTPROCESSOR_WHEN),
        layout=(Join("when", (":", "fields")), "regex", "replace"),
        repeatable=True,
        group=POSTPROCESSING,
        descr="replace text in metadata fields using a regex ([WHEN:]FIELDS REGEX REPLACE)",
    ),
    "xattrs": Flag("--xattrs", group=POSTPROCESSING, descr="write metadata to the file's xattrs"),
    "concat_playlist": Option(
        "--concat-playlist",
        Param("policy", default="multi_video", choices=CONCAT_POLICIES),
        group=POSTPROCESSING,
        descr="concatenate videos in a playlist",
    ),
    "fixup": Option(
        "--fixup",
        Param("policy", default="detect_or_warn", choices=FIXUP_POLICIES),
        group=POSTPROCESSING,
        descr="automatically correct known faults of the file",
    ),
    "ffmpeg_location": Option("--ffmpeg-location", Param("path"), group=POSTPROCESSING, descr="location of the ffmpeg binary or its directory"),
    "exec": Option(
        "--exec",
        Param("cmd"),
        Param("when", default="after_move", choices=POSTPROCESSOR_WHEN),
        layout=(Join("when", (":", "cmd")),),
        repeatable=True,
        group=POSTPROCESSING,
        descr="execute a command at the given stage ([WHEN:]CMD)",
    ),
    "no_exec": Flag("--no-exec", group=POSTPROCESSING, descr="remove any previously defined --exec"),
    "convert_subs": Option(
        "--convert-subs",
        Param("format", default="none", choices=SUBTITLE_CONVERSIONS),
        group=POSTPROCESSING,
        descr="convert the subtitles to another format",
    ),
    "convert_thumbnails": Option(
        "--convert-thumbnails",
        Param("format", default="none"),
        group=POSTPROCESSING,
        descr="convert the thumbnails to another format",
    ),
    "split_chapters": Flag("--split-chapters", group=POSTPROCESSING, descr="split the video into multiple files based on chapters"),
    "no_split_chapters": Flag("--no-split-chapters", group=POSTPROCESSING, descr="do not split the video based on chapters"),
    "remove_chapters": Option(
        "--remove-chapters",
        Param("regex"),
        repeatable=True,
        group=POSTPROCESSING,
        descr="remove chapters whose title matches the regex",
    ),
    "no_remove_chapters": Flag("--no-remove-chapters", group=POSTPROCESSING, descr="do not remove any chapters"),
    "force_keyframes_at_cuts": Flag("--force-keyframes-at-cuts", group=POSTPROCESSING, descr="force keyframes at cuts when removing sections"),
    "no_force_keyframes_at_cuts": Flag("--no-force-keyframes-at-cuts", group=POSTPROCESSING, descr="do not force keyframes around chapters"),
    "use_postprocessor": Option(
        "--use-postprocessor",
        Param("name"),
        repeatable=True,
        group=POSTPROCESSING,
        descr="enable a plugin post-processor",
    ),

    # --- sponsorblock ---
    "sponsorblock_mark": Option(
        "--sponsorblock-mark",
        Param("categories", kind=listing),
        group=SPONSORBLOCK,
        descr="SponsorBlock categories to create chapters for",
    ),
    "sponsorblock_remove": Option(
        "--sponsorblock-remove",
        Param("categories", kind=listing),
        group=SPONSORBLOCK,
        descr="SponsorBlock categories to remove from the video",
    ),
    "sponsorblock_chapter_title": Option(
        "--sponsorblock-chapter-title",
        Param("template", default="[SponsorBlock]: %(category_names)l"),
        group=SPONSORBLOCK,
        descr="output template for the title of SponsorBlock chapters",
    ),
    "no_sponsorblock": Flag("--no-sponsorblock", group=SPONSORBLOCK, descr="disable both mark and remove"),
    "sponsorblock_api": Option(
        "--sponsorblock-api",
        Param("url", default="https://sponsor.ajay.app"),
        group=SPONSORBLOCK,
        descr="SponsorBlock API location",
    ),

    # --- extractor ---
    "extractor_retries": Option(
        "--extractor-retries",
        Param("retries", kind=limit(integral=True), default=3),
        group=EXTRACTOR,
        descr="number of retries for known extractor errors, or \"infinite\"",
    ),
    "allow_dynamic_mpd": Flag("--allow-dynamic-mpd", group=EXTRACTOR, descr="process dynamic DASH manifests"),
    "ignore_dynamic_mpd": Flag("--ignore-dynamic-mpd", group=EXTRACTOR, descr="do not process dynamic DASH manifests"),
    "hls_split_discontinuity": Flag("--hls-split-discontinuity", group=EXTRACTOR, descr="split HLS playlists at discontinuities"),
    "no_hls_split_discontinuity": Flag("--no-hls-split-discontinuity", group=EXTRACTOR, descr="do not split HLS playlists"),
    "extractor_args": Option(
        "--extractor-args",
        Param("ie_key"),
        Param("args"),
        layout=(Join("ie_key", (":", "args")),),
        repeatable=True,
        group=EXTRACTOR,
        descr="pass arguments to an extractor (IE_KEY:ARGS)",
    ),
})
"""
Read-only mapping of builder method name -> declaration, in yt-dlp --help order.
"""


__all__ = (
    # Catalog
    "CATALOG",
    "GROUPS",

    # Enumerations
    "JS_RUNTIMES",
    "COOKIE_BROWSERS",
    "KEYRINGS",
    "RELEASE_CHANNELS",
    "REMOTE_COMPONENTS",
    "RETRY_TYPES",
    "DOWNLOADER_PROTOCOLS",
    "PATH_TYPES",
    "PRINT_WHEN",
    "PROGRESS_TEMPLATE_TYPES",
    "POSTPROCESSOR_WHEN",
    "COLOR_POLICIES",
    "COLOR_STREAMS",
    "PRESET_ALIASES",
    "CONCAT_POLICIES",
    "FIXUP_POLICIES",
    "SUBTITLE_CONVERSIONS",
)
