# --- Network & Timing ---
DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
REQUEST_TIMEOUT = 15 # seconds

# --- Blog ---
DEFAULT_BLOG_URL = 'https://ritholtz.com/'

# Links to individual posts on the blog index page
POST_TITLE_LINK_SELECTOR = '.post-title-link'
# Container holding the body of a single post
ARTICLE_BODY_SELECTOR = '.entry-content'
# Quoted article links inside the post body
ARTICLE_LINK_SELECTOR = f'{ARTICLE_BODY_SELECTOR} blockquote p a'

# Lowercased post title must contain READS_KEYWORD and one of READS_PERIOD_KEYWORDS
READS_KEYWORD = 'read'
READS_PERIOD_KEYWORDS = ('day', 'weekend')

# --- Title Resolution ---
# Publishers that block programmatic fetches; titles come from the URL slug instead
HOSTILE_DOMAINS = ('bloomberg.com',)
# Case-sensitive suffix; '.PDF' goes through the live tier
DOCUMENT_SUFFIX = '.pdf'

# --- Delivery ---
MAILGUN_MESSAGES_URL = 'https://api.mailgun.net/v3/sandbox{sandbox_id}.mailgun.org/messages'
MAILGUN_FROM = 'mailgun me <postmaster@sandbox{sandbox_id}.mailgun.org>'
MAIL_SUBJECT_PREFIX = 'big picture reads json'
