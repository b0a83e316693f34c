{'config-search-paths': ['{:user-config-path}/newspath/config.yaml',],
 'auth-variables': {
     'nntp-user': {
         'default': None,
         'environment-variables': 'NEWSPATH_NNTP_USER'},
     'nntp-port': {
         'default': '119',
         'environment-variables': 'NEWSPATH_NNTP_PORT'},
     'snews-port': {
         'default': '563',
         'environment-variables': 'NEWSPATH_SNEWS_PORT'},
     'news-folder': {
         'default': None,
         'environment-variables': 'NEWSPATH_FOLDER'},}}
