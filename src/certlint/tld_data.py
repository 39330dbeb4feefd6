# Code generated by certlint-tld-update; DO NOT EDIT.
"""
Top-level domain validity periods.

Merged from the ICANN gTLD registry (delegation and removal dates) and the
IANA TLD list (ccTLDs, default delegation date 1985-01-01). Regenerate with:

    certlint-tld-update src/certlint/tld_data.py
"""

from certlint.domain.models import GTLDPeriod

TLD_MAP: dict[str, GTLDPeriod] = {
    'aaa': GTLDPeriod(gtld='aaa', delegation_date='1985-01-01', removal_date=''),
    'aarp': GTLDPeriod(gtld='aarp', delegation_date='1985-01-01', removal_date=''),
    'abarth': GTLDPeriod(gtld='abarth', delegation_date='1985-01-01', removal_date=''),
    'abb': GTLDPeriod(gtld='abb', delegation_date='1985-01-01', removal_date=''),
    'abbott': GTLDPeriod(gtld='abbott', delegation_date='1985-01-01', removal_date=''),
    'abbvie': GTLDPeriod(gtld='abbvie', delegation_date='1985-01-01', removal_date=''),
    'abc': GTLDPeriod(gtld='abc', delegation_date='1985-01-01', removal_date=''),
    'able': GTLDPeriod(gtld='able', delegation_date='1985-01-01', removal_date=''),
    'abogado': GTLDPeriod(gtld='abogado', delegation_date='1985-01-01', removal_date=''),
    'abudhabi': GTLDPeriod(gtld='abudhabi', delegation_date='1985-01-01', removal_date=''),
    'ac': GTLDPeriod(gtld='ac', delegation_date='1985-01-01', removal_date=''),
    'academy': GTLDPeriod(gtld='academy', delegation_date='1985-01-01', removal_date=''),
    'accenture': GTLDPeriod(gtld='accenture', delegation_date='1985-01-01', removal_date=''),
    'accountant': GTLDPeriod(gtld='accountant', delegation_date='1985-01-01', removal_date=''),
    'accountants': GTLDPeriod(gtld='accountants', delegation_date='1985-01-01', removal_date=''),
    'aco': GTLDPeriod(gtld='aco', delegation_date='1985-01-01', removal_date=''),
    'actor': GTLDPeriod(gtld='actor', delegation_date='1985-01-01', removal_date=''),
    'ad': GTLDPeriod(gtld='ad', delegation_date='1985-01-01', removal_date=''),
    'ads': GTLDPeriod(gtld='ads', delegation_date='1985-01-01', removal_date=''),
    'adult': GTLDPeriod(gtld='adult', delegation_date='1985-01-01', removal_date=''),
    'ae': GTLDPeriod(gtld='ae', delegation_date='1985-01-01', removal_date=''),
    'aeg': GTLDPeriod(gtld='aeg', delegation_date='1985-01-01', removal_date=''),
    'aero': GTLDPeriod(gtld='aero', delegation_date='1985-01-01', removal_date=''),
    'aetna': GTLDPeriod(gtld='aetna', delegation_date='1985-01-01', removal_date=''),
    'af': GTLDPeriod(gtld='af', delegation_date='1985-01-01', removal_date=''),
    'afl': GTLDPeriod(gtld='afl', delegation_date='1985-01-01', removal_date=''),
    'africa': GTLDPeriod(gtld='africa', delegation_date='1985-01-01', removal_date=''),
    'ag': GTLDPeriod(gtld='ag', delegation_date='1985-01-01', removal_date=''),
    'agakhan': GTLDPeriod(gtld='agakhan', delegation_date='1985-01-01', removal_date=''),
    'agency': GTLDPeriod(gtld='agency', delegation_date='1985-01-01', removal_date=''),
    'ai': GTLDPeriod(gtld='ai', delegation_date='1985-01-01', removal_date=''),
    'aig': GTLDPeriod(gtld='aig', delegation_date='1985-01-01', removal_date=''),
    'airbus': GTLDPeriod(gtld='airbus', delegation_date='1985-01-01', removal_date=''),
    'airforce': GTLDPeriod(gtld='airforce', delegation_date='1985-01-01', removal_date=''),
    'airtel': GTLDPeriod(gtld='airtel', delegation_date='1985-01-01', removal_date=''),
    'akdn': GTLDPeriod(gtld='akdn', delegation_date='1985-01-01', removal_date=''),
    'al': GTLDPeriod(gtld='al', delegation_date='1985-01-01', removal_date=''),
    'alfaromeo': GTLDPeriod(gtld='alfaromeo', delegation_date='1985-01-01', removal_date=''),
    'alibaba': GTLDPeriod(gtld='alibaba', delegation_date='1985-01-01', removal_date=''),
    'alipay': GTLDPeriod(gtld='alipay', delegation_date='1985-01-01', removal_date=''),
    'allfinanz': GTLDPeriod(gtld='allfinanz', delegation_date='1985-01-01', removal_date=''),
    'allstate': GTLDPeriod(gtld='allstate', delegation_date='1985-01-01', removal_date=''),
    'ally': GTLDPeriod(gtld='ally', delegation_date='1985-01-01', removal_date=''),
    'alsace': GTLDPeriod(gtld='alsace', delegation_date='1985-01-01', removal_date=''),
    'alstom': GTLDPeriod(gtld='alstom', delegation_date='1985-01-01', removal_date=''),
    'am': GTLDPeriod(gtld='am', delegation_date='1985-01-01', removal_date=''),
    'amazon': GTLDPeriod(gtld='amazon', delegation_date='1985-01-01', removal_date=''),
    'americanexpress': GTLDPeriod(gtld='americanexpress', delegation_date='1985-01-01', removal_date=''),
    'americanfamily': GTLDPeriod(gtld='americanfamily', delegation_date='1985-01-01', removal_date=''),
    'amex': GTLDPeriod(gtld='amex', delegation_date='1985-01-01', removal_date=''),
    'amfam': GTLDPeriod(gtld='amfam', delegation_date='1985-01-01', removal_date=''),
    'amica': GTLDPeriod(gtld='amica', delegation_date='1985-01-01', removal_date=''),
    'amsterdam': GTLDPeriod(gtld='amsterdam', delegation_date='1985-01-01', removal_date=''),
    'analytics': GTLDPeriod(gtld='analytics', delegation_date='1985-01-01', removal_date=''),
    'android': GTLDPeriod(gtld='android', delegation_date='1985-01-01', removal_date=''),
    'anquan': GTLDPeriod(gtld='anquan', delegation_date='1985-01-01', removal_date=''),
    'anz': GTLDPeriod(gtld='anz', delegation_date='1985-01-01', removal_date=''),
    'ao': GTLDPeriod(gtld='ao', delegation_date='1985-01-01', removal_date=''),
    'aol': GTLDPeriod(gtld='aol', delegation_date='1985-01-01', removal_date=''),
    'apartments': GTLDPeriod(gtld='apartments', delegation_date='1985-01-01', removal_date=''),
    'app': GTLDPeriod(gtld='app', delegation_date='1985-01-01', removal_date=''),
    'apple': GTLDPeriod(gtld='apple', delegation_date='1985-01-01', removal_date=''),
    'aq': GTLDPeriod(gtld='aq', delegation_date='1985-01-01', removal_date=''),
    'aquarelle': GTLDPeriod(gtld='aquarelle', delegation_date='1985-01-01', removal_date=''),
    'ar': GTLDPeriod(gtld='ar', delegation_date='1985-01-01', removal_date=''),
    'arab': GTLDPeriod(gtld='arab', delegation_date='1985-01-01', removal_date=''),
    'aramco': GTLDPeriod(gtld='aramco', delegation_date='1985-01-01', removal_date=''),
    'archi': GTLDPeriod(gtld='archi', delegation_date='1985-01-01', removal_date=''),
    'army': GTLDPeriod(gtld='army', delegation_date='1985-01-01', removal_date=''),
    'arpa': GTLDPeriod(gtld='arpa', delegation_date='1985-01-01', removal_date=''),
    'art': GTLDPeriod(gtld='art', delegation_date='1985-01-01', removal_date=''),
    'arte': GTLDPeriod(gtld='arte', delegation_date='1985-01-01', removal_date=''),
    'as': GTLDPeriod(gtld='as', delegation_date='1985-01-01', removal_date=''),
    'asda': GTLDPeriod(gtld='asda', delegation_date='1985-01-01', removal_date=''),
    'asia': GTLDPeriod(gtld='asia', delegation_date='1985-01-01', removal_date=''),
    'associates': GTLDPeriod(gtld='associates', delegation_date='1985-01-01', removal_date=''),
    'at': GTLDPeriod(gtld='at', delegation_date='1985-01-01', removal_date=''),
    'athleta': GTLDPeriod(gtld='athleta', delegation_date='1985-01-01', removal_date=''),
    'attorney': GTLDPeriod(gtld='attorney', delegation_date='1985-01-01', removal_date=''),
    'au': GTLDPeriod(gtld='au', delegation_date='1985-01-01', removal_date=''),
    'auction': GTLDPeriod(gtld='auction', delegation_date='1985-01-01', removal_date=''),
    'audi': GTLDPeriod(gtld='audi', delegation_date='1985-01-01', removal_date=''),
    'audible': GTLDPeriod(gtld='audible', delegation_date='1985-01-01', removal_date=''),
    'audio': GTLDPeriod(gtld='audio', delegation_date='1985-01-01', removal_date=''),
    'auspost': GTLDPeriod(gtld='auspost', delegation_date='1985-01-01', removal_date=''),
    'author': GTLDPeriod(gtld='author', delegation_date='1985-01-01', removal_date=''),
    'auto': GTLDPeriod(gtld='auto', delegation_date='1985-01-01', removal_date=''),
    'autos': GTLDPeriod(gtld='autos', delegation_date='1985-01-01', removal_date=''),
    'avianca': GTLDPeriod(gtld='avianca', delegation_date='1985-01-01', removal_date=''),
    'aw': GTLDPeriod(gtld='aw', delegation_date='1985-01-01', removal_date=''),
    'aws': GTLDPeriod(gtld='aws', delegation_date='1985-01-01', removal_date=''),
    'ax': GTLDPeriod(gtld='ax', delegation_date='1985-01-01', removal_date=''),
    'axa': GTLDPeriod(gtld='axa', delegation_date='1985-01-01', removal_date=''),
    'az': GTLDPeriod(gtld='az', delegation_date='1985-01-01', removal_date=''),
    'azure': GTLDPeriod(gtld='azure', delegation_date='1985-01-01', removal_date=''),
    'ba': GTLDPeriod(gtld='ba', delegation_date='1985-01-01', removal_date=''),
    'baby': GTLDPeriod(gtld='baby', delegation_date='1985-01-01', removal_date=''),
    'baidu': GTLDPeriod(gtld='baidu', delegation_date='1985-01-01', removal_date=''),
    'banamex': GTLDPeriod(gtld='banamex', delegation_date='1985-01-01', removal_date=''),
    'bananarepublic': GTLDPeriod(gtld='bananarepublic', delegation_date='1985-01-01', removal_date=''),
    'band': GTLDPeriod(gtld='band', delegation_date='1985-01-01', removal_date=''),
    'bank': GTLDPeriod(gtld='bank', delegation_date='1985-01-01', removal_date=''),
    'bar': GTLDPeriod(gtld='bar', delegation_date='1985-01-01', removal_date=''),
    'barcelona': GTLDPeriod(gtld='barcelona', delegation_date='1985-01-01', removal_date=''),
    'barclaycard': GTLDPeriod(gtld='barclaycard', delegation_date='1985-01-01', removal_date=''),
    'barclays': GTLDPeriod(gtld='barclays', delegation_date='1985-01-01', removal_date=''),
    'barefoot': GTLDPeriod(gtld='barefoot', delegation_date='1985-01-01', removal_date=''),
    'bargains': GTLDPeriod(gtld='bargains', delegation_date='1985-01-01', removal_date=''),
    'baseball': GTLDPeriod(gtld='baseball', delegation_date='1985-01-01', removal_date=''),
    'basketball': GTLDPeriod(gtld='basketball', delegation_date='1985-01-01', removal_date=''),
    'bauhaus': GTLDPeriod(gtld='bauhaus', delegation_date='1985-01-01', removal_date=''),
    'bayern': GTLDPeriod(gtld='bayern', delegation_date='1985-01-01', removal_date=''),
    'bb': GTLDPeriod(gtld='bb', delegation_date='1985-01-01', removal_date=''),
    'bbc': GTLDPeriod(gtld='bbc', delegation_date='1985-01-01', removal_date=''),
    'bbt': GTLDPeriod(gtld='bbt', delegation_date='1985-01-01', removal_date=''),
    'bbva': GTLDPeriod(gtld='bbva', delegation_date='1985-01-01', removal_date=''),
    'bcg': GTLDPeriod(gtld='bcg', delegation_date='1985-01-01', removal_date=''),
    'bcn': GTLDPeriod(gtld='bcn', delegation_date='1985-01-01', removal_date=''),
    'be': GTLDPeriod(gtld='be', delegation_date='1985-01-01', removal_date=''),
    'beats': GTLDPeriod(gtld='beats', delegation_date='1985-01-01', removal_date=''),
    'beauty': GTLDPeriod(gtld='beauty', delegation_date='1985-01-01', removal_date=''),
    'beer': GTLDPeriod(gtld='beer', delegation_date='1985-01-01', removal_date=''),
    'bentley': GTLDPeriod(gtld='bentley', delegation_date='1985-01-01', removal_date=''),
    'berlin': GTLDPeriod(gtld='berlin', delegation_date='1985-01-01', removal_date=''),
    'best': GTLDPeriod(gtld='best', delegation_date='1985-01-01', removal_date=''),
    'bestbuy': GTLDPeriod(gtld='bestbuy', delegation_date='1985-01-01', removal_date=''),
    'bet': GTLDPeriod(gtld='bet', delegation_date='1985-01-01', removal_date=''),
    'bf': GTLDPeriod(gtld='bf', delegation_date='1985-01-01', removal_date=''),
    'bg': GTLDPeriod(gtld='bg', delegation_date='1985-01-01', removal_date=''),
    'bh': GTLDPeriod(gtld='bh', delegation_date='1985-01-01', removal_date=''),
    'bharti': GTLDPeriod(gtld='bharti', delegation_date='1985-01-01', removal_date=''),
    'bi': GTLDPeriod(gtld='bi', delegation_date='1985-01-01', removal_date=''),
    'bible': GTLDPeriod(gtld='bible', delegation_date='1985-01-01', removal_date=''),
    'bid': GTLDPeriod(gtld='bid', delegation_date='1985-01-01', removal_date=''),
    'bike': GTLDPeriod(gtld='bike', delegation_date='1985-01-01', removal_date=''),
    'bing': GTLDPeriod(gtld='bing', delegation_date='1985-01-01', removal_date=''),
    'bingo': GTLDPeriod(gtld='bingo', delegation_date='1985-01-01', removal_date=''),
    'bio': GTLDPeriod(gtld='bio', delegation_date='1985-01-01', removal_date=''),
    'biz': GTLDPeriod(gtld='biz', delegation_date='2001-06-26', removal_date=''),
    'bj': GTLDPeriod(gtld='bj', delegation_date='1985-01-01', removal_date=''),
    'black': GTLDPeriod(gtld='black', delegation_date='1985-01-01', removal_date=''),
    'blackfriday': GTLDPeriod(gtld='blackfriday', delegation_date='1985-01-01', removal_date=''),
    'blockbuster': GTLDPeriod(gtld='blockbuster', delegation_date='1985-01-01', removal_date=''),
    'blog': GTLDPeriod(gtld='blog', delegation_date='1985-01-01', removal_date=''),
    'bloomberg': GTLDPeriod(gtld='bloomberg', delegation_date='1985-01-01', removal_date=''),
    'blue': GTLDPeriod(gtld='blue', delegation_date='1985-01-01', removal_date=''),
    'bm': GTLDPeriod(gtld='bm', delegation_date='1985-01-01', removal_date=''),
    'bms': GTLDPeriod(gtld='bms', delegation_date='1985-01-01', removal_date=''),
    'bmw': GTLDPeriod(gtld='bmw', delegation_date='1985-01-01', removal_date=''),
    'bn': GTLDPeriod(gtld='bn', delegation_date='1985-01-01', removal_date=''),
    'bnpparibas': GTLDPeriod(gtld='bnpparibas', delegation_date='1985-01-01', removal_date=''),
    'bo': GTLDPeriod(gtld='bo', delegation_date='1985-01-01', removal_date=''),
    'boats': GTLDPeriod(gtld='boats', delegation_date='1985-01-01', removal_date=''),
    'boehringer': GTLDPeriod(gtld='boehringer', delegation_date='1985-01-01', removal_date=''),
    'bofa': GTLDPeriod(gtld='bofa', delegation_date='1985-01-01', removal_date=''),
    'bom': GTLDPeriod(gtld='bom', delegation_date='1985-01-01', removal_date=''),
    'bond': GTLDPeriod(gtld='bond', delegation_date='1985-01-01', removal_date=''),
    'boo': GTLDPeriod(gtld='boo', delegation_date='1985-01-01', removal_date=''),
    'book': GTLDPeriod(gtld='book', delegation_date='1985-01-01', removal_date=''),
    'booking': GTLDPeriod(gtld='booking', delegation_date='1985-01-01', removal_date=''),
    'bosch': GTLDPeriod(gtld='bosch', delegation_date='1985-01-01', removal_date=''),
    'bostik': GTLDPeriod(gtld='bostik', delegation_date='1985-01-01', removal_date=''),
    'boston': GTLDPeriod(gtld='boston', delegation_date='1985-01-01', removal_date=''),
    'bot': GTLDPeriod(gtld='bot', delegation_date='1985-01-01', removal_date=''),
    'boutique': GTLDPeriod(gtld='boutique', delegation_date='1985-01-01', removal_date=''),
    'box': GTLDPeriod(gtld='box', delegation_date='1985-01-01', removal_date=''),
    'br': GTLDPeriod(gtld='br', delegation_date='1985-01-01', removal_date=''),
    'bradesco': GTLDPeriod(gtld='bradesco', delegation_date='1985-01-01', removal_date=''),
    'bridgestone': GTLDPeriod(gtld='bridgestone', delegation_date='1985-01-01', removal_date=''),
    'broadway': GTLDPeriod(gtld='broadway', delegation_date='1985-01-01', removal_date=''),
    'broker': GTLDPeriod(gtld='broker', delegation_date='1985-01-01', removal_date=''),
    'brother': GTLDPeriod(gtld='brother', delegation_date='1985-01-01', removal_date=''),
    'brussels': GTLDPeriod(gtld='brussels', delegation_date='1985-01-01', removal_date=''),
    'bs': GTLDPeriod(gtld='bs', delegation_date='1985-01-01', removal_date=''),
    'bt': GTLDPeriod(gtld='bt', delegation_date='1985-01-01', removal_date=''),
    'build': GTLDPeriod(gtld='build', delegation_date='1985-01-01', removal_date=''),
    'builders': GTLDPeriod(gtld='builders', delegation_date='1985-01-01', removal_date=''),
    'business': GTLDPeriod(gtld='business', delegation_date='1985-01-01', removal_date=''),
    'buy': GTLDPeriod(gtld='buy', delegation_date='1985-01-01', removal_date=''),
    'buzz': GTLDPeriod(gtld='buzz', delegation_date='1985-01-01', removal_date=''),
    'bv': GTLDPeriod(gtld='bv', delegation_date='1985-01-01', removal_date=''),
    'bw': GTLDPeriod(gtld='bw', delegation_date='1985-01-01', removal_date=''),
    'by': GTLDPeriod(gtld='by', delegation_date='1985-01-01', removal_date=''),
    'bz': GTLDPeriod(gtld='bz', delegation_date='1985-01-01', removal_date=''),
    'bzh': GTLDPeriod(gtld='bzh', delegation_date='1985-01-01', removal_date=''),
    'ca': GTLDPeriod(gtld='ca', delegation_date='1985-01-01', removal_date=''),
    'cab': GTLDPeriod(gtld='cab', delegation_date='1985-01-01', removal_date=''),
    'cafe': GTLDPeriod(gtld='cafe', delegation_date='1985-01-01', removal_date=''),
    'cal': GTLDPeriod(gtld='cal', delegation_date='1985-01-01', removal_date=''),
    'call': GTLDPeriod(gtld='call', delegation_date='1985-01-01', removal_date=''),
    'calvinklein': GTLDPeriod(gtld='calvinklein', delegation_date='1985-01-01', removal_date=''),
    'cam': GTLDPeriod(gtld='cam', delegation_date='1985-01-01', removal_date=''),
    'camera': GTLDPeriod(gtld='camera', delegation_date='1985-01-01', removal_date=''),
    'camp': GTLDPeriod(gtld='camp', delegation_date='1985-01-01', removal_date=''),
    'canon': GTLDPeriod(gtld='canon', delegation_date='1985-01-01', removal_date=''),
    'capetown': GTLDPeriod(gtld='capetown', delegation_date='1985-01-01', removal_date=''),
    'capital': GTLDPeriod(gtld='capital', delegation_date='1985-01-01', removal_date=''),
    'capitalone': GTLDPeriod(gtld='capitalone', delegation_date='1985-01-01', removal_date=''),
    'car': GTLDPeriod(gtld='car', delegation_date='1985-01-01', removal_date=''),
    'caravan': GTLDPeriod(gtld='caravan', delegation_date='1985-01-01', removal_date=''),
    'cards': GTLDPeriod(gtld='cards', delegation_date='1985-01-01', removal_date=''),
    'care': GTLDPeriod(gtld='care', delegation_date='1985-01-01', removal_date=''),
    'career': GTLDPeriod(gtld='career', delegation_date='1985-01-01', removal_date=''),
    'careers': GTLDPeriod(gtld='careers', delegation_date='1985-01-01', removal_date=''),
    'cars': GTLDPeriod(gtld='cars', delegation_date='1985-01-01', removal_date=''),
    'casa': GTLDPeriod(gtld='casa', delegation_date='1985-01-01', removal_date=''),
    'case': GTLDPeriod(gtld='case', delegation_date='1985-01-01', removal_date=''),
    'cash': GTLDPeriod(gtld='cash', delegation_date='1985-01-01', removal_date=''),
    'casino': GTLDPeriod(gtld='casino', delegation_date='1985-01-01', removal_date=''),
    'cat': GTLDPeriod(gtld='cat', delegation_date='1985-01-01', removal_date=''),
    'catering': GTLDPeriod(gtld='catering', delegation_date='1985-01-01', removal_date=''),
    'catholic': GTLDPeriod(gtld='catholic', delegation_date='1985-01-01', removal_date=''),
    'cba': GTLDPeriod(gtld='cba', delegation_date='1985-01-01', removal_date=''),
    'cbn': GTLDPeriod(gtld='cbn', delegation_date='1985-01-01', removal_date=''),
    'cbre': GTLDPeriod(gtld='cbre', delegation_date='1985-01-01', removal_date=''),
    'cbs': GTLDPeriod(gtld='cbs', delegation_date='1985-01-01', removal_date=''),
    'cc': GTLDPeriod(gtld='cc', delegation_date='1985-01-01', removal_date=''),
    'cd': GTLDPeriod(gtld='cd', delegation_date='1985-01-01', removal_date=''),
    'center': GTLDPeriod(gtld='center', delegation_date='1985-01-01', removal_date=''),
    'ceo': GTLDPeriod(gtld='ceo', delegation_date='1985-01-01', removal_date=''),
    'cern': GTLDPeriod(gtld='cern', delegation_date='1985-01-01', removal_date=''),
    'cf': GTLDPeriod(gtld='cf', delegation_date='1985-01-01', removal_date=''),
    'cfa': GTLDPeriod(gtld='cfa', delegation_date='1985-01-01', removal_date=''),
    'cfd': GTLDPeriod(gtld='cfd', delegation_date='1985-01-01', removal_date=''),
    'cg': GTLDPeriod(gtld='cg', delegation_date='1985-01-01', removal_date=''),
    'ch': GTLDPeriod(gtld='ch', delegation_date='1985-01-01', removal_date=''),
    'chanel': GTLDPeriod(gtld='chanel', delegation_date='1985-01-01', removal_date=''),
    'channel': GTLDPeriod(gtld='channel', delegation_date='1985-01-01', removal_date=''),
    'charity': GTLDPeriod(gtld='charity', delegation_date='1985-01-01', removal_date=''),
    'chase': GTLDPeriod(gtld='chase', delegation_date='1985-01-01', removal_date=''),
    'chat': GTLDPeriod(gtld='chat', delegation_date='1985-01-01', removal_date=''),
    'cheap': GTLDPeriod(gtld='cheap', delegation_date='1985-01-01', removal_date=''),
    'chintai': GTLDPeriod(gtld='chintai', delegation_date='1985-01-01', removal_date=''),
    'christmas': GTLDPeriod(gtld='christmas', delegation_date='1985-01-01', removal_date=''),
    'chrome': GTLDPeriod(gtld='chrome', delegation_date='1985-01-01', removal_date=''),
    'church': GTLDPeriod(gtld='church', delegation_date='1985-01-01', removal_date=''),
    'ci': GTLDPeriod(gtld='ci', delegation_date='1985-01-01', removal_date=''),
    'cipriani': GTLDPeriod(gtld='cipriani', delegation_date='1985-01-01', removal_date=''),
    'circle': GTLDPeriod(gtld='circle', delegation_date='1985-01-01', removal_date=''),
    'cisco': GTLDPeriod(gtld='cisco', delegation_date='1985-01-01', removal_date=''),
    'citadel': GTLDPeriod(gtld='citadel', delegation_date='1985-01-01', removal_date=''),
    'citi': GTLDPeriod(gtld='citi', delegation_date='1985-01-01', removal_date=''),
    'citic': GTLDPeriod(gtld='citic', delegation_date='1985-01-01', removal_date=''),
    'city': GTLDPeriod(gtld='city', delegation_date='1985-01-01', removal_date=''),
    'cityeats': GTLDPeriod(gtld='cityeats', delegation_date='1985-01-01', removal_date=''),
    'cl': GTLDPeriod(gtld='cl', delegation_date='1985-01-01', removal_date=''),
    'claims': GTLDPeriod(gtld='claims', delegation_date='1985-01-01', removal_date=''),
    'cleaning': GTLDPeriod(gtld='cleaning', delegation_date='1985-01-01', removal_date=''),
    'click': GTLDPeriod(gtld='click', delegation_date='1985-01-01', removal_date=''),
    'clinic': GTLDPeriod(gtld='clinic', delegation_date='1985-01-01', removal_date=''),
    'clinique': GTLDPeriod(gtld='clinique', delegation_date='1985-01-01', removal_date=''),
    'clothing': GTLDPeriod(gtld='clothing', delegation_date='1985-01-01', removal_date=''),
    'cloud': GTLDPeriod(gtld='cloud', delegation_date='1985-01-01', removal_date=''),
    'club': GTLDPeriod(gtld='club', delegation_date='1985-01-01', removal_date=''),
    'clubmed': GTLDPeriod(gtld='clubmed', delegation_date='1985-01-01', removal_date=''),
    'cm': GTLDPeriod(gtld='cm', delegation_date='1985-01-01', removal_date=''),
    'cn': GTLDPeriod(gtld='cn', delegation_date='1985-01-01', removal_date=''),
    'co': GTLDPeriod(gtld='co', delegation_date='1985-01-01', removal_date=''),
    'coach': GTLDPeriod(gtld='coach', delegation_date='1985-01-01', removal_date=''),
    'codes': GTLDPeriod(gtld='codes', delegation_date='1985-01-01', removal_date=''),
    'coffee': GTLDPeriod(gtld='coffee', delegation_date='1985-01-01', removal_date=''),
    'college': GTLDPeriod(gtld='college', delegation_date='1985-01-01', removal_date=''),
    'cologne': GTLDPeriod(gtld='cologne', delegation_date='1985-01-01', removal_date=''),
    'com': GTLDPeriod(gtld='com', delegation_date='1985-01-01', removal_date=''),
    'comcast': GTLDPeriod(gtld='comcast', delegation_date='1985-01-01', removal_date=''),
    'commbank': GTLDPeriod(gtld='commbank', delegation_date='1985-01-01', removal_date=''),
    'community': GTLDPeriod(gtld='community', delegation_date='1985-01-01', removal_date=''),
    'company': GTLDPeriod(gtld='company', delegation_date='1985-01-01', removal_date=''),
    'compare': GTLDPeriod(gtld='compare', delegation_date='1985-01-01', removal_date=''),
    'computer': GTLDPeriod(gtld='computer', delegation_date='1985-01-01', removal_date=''),
    'comsec': GTLDPeriod(gtld='comsec', delegation_date='1985-01-01', removal_date=''),
    'condos': GTLDPeriod(gtld='condos', delegation_date='1985-01-01', removal_date=''),
    'construction': GTLDPeriod(gtld='construction', delegation_date='1985-01-01', removal_date=''),
    'consulting': GTLDPeriod(gtld='consulting', delegation_date='1985-01-01', removal_date=''),
    'contact': GTLDPeriod(gtld='contact', delegation_date='1985-01-01', removal_date=''),
    'contractors': GTLDPeriod(gtld='contractors', delegation_date='1985-01-01', removal_date=''),
    'cooking': GTLDPeriod(gtld='cooking', delegation_date='1985-01-01', removal_date=''),
    'cookingchannel': GTLDPeriod(gtld='cookingchannel', delegation_date='1985-01-01', removal_date=''),
    'cool': GTLDPeriod(gtld='cool', delegation_date='1985-01-01', removal_date=''),
    'coop': GTLDPeriod(gtld='coop', delegation_date='1985-01-01', removal_date=''),
    'corsica': GTLDPeriod(gtld='corsica', delegation_date='1985-01-01', removal_date=''),
    'country': GTLDPeriod(gtld='country', delegation_date='1985-01-01', removal_date=''),
    'coupon': GTLDPeriod(gtld='coupon', delegation_date='1985-01-01', removal_date=''),
    'coupons': GTLDPeriod(gtld='coupons', delegation_date='1985-01-01', removal_date=''),
    'courses': GTLDPeriod(gtld='courses', delegation_date='1985-01-01', removal_date=''),
    'cpa': GTLDPeriod(gtld='cpa', delegation_date='1985-01-01', removal_date=''),
    'cr': GTLDPeriod(gtld='cr', delegation_date='1985-01-01', removal_date=''),
    'credit': GTLDPeriod(gtld='credit', delegation_date='1985-01-01', removal_date=''),
    'creditcard': GTLDPeriod(gtld='creditcard', delegation_date='1985-01-01', removal_date=''),
    'creditunion': GTLDPeriod(gtld='creditunion', delegation_date='1985-01-01', removal_date=''),
    'cricket': GTLDPeriod(gtld='cricket', delegation_date='1985-01-01', removal_date=''),
    'crown': GTLDPeriod(gtld='crown', delegation_date='1985-01-01', removal_date=''),
    'crs': GTLDPeriod(gtld='crs', delegation_date='1985-01-01', removal_date=''),
    'cruise': GTLDPeriod(gtld='cruise', delegation_date='1985-01-01', removal_date=''),
    'cruises': GTLDPeriod(gtld='cruises', delegation_date='1985-01-01', removal_date=''),
    'cu': GTLDPeriod(gtld='cu', delegation_date='1985-01-01', removal_date=''),
    'cuisinella': GTLDPeriod(gtld='cuisinella', delegation_date='1985-01-01', removal_date=''),
    'cv': GTLDPeriod(gtld='cv', delegation_date='1985-01-01', removal_date=''),
    'cw': GTLDPeriod(gtld='cw', delegation_date='1985-01-01', removal_date=''),
    'cx': GTLDPeriod(gtld='cx', delegation_date='1985-01-01', removal_date=''),
    'cy': GTLDPeriod(gtld='cy', delegation_date='1985-01-01', removal_date=''),
    'cymru': GTLDPeriod(gtld='cymru', delegation_date='1985-01-01', removal_date=''),
    'cyou': GTLDPeriod(gtld='cyou', delegation_date='1985-01-01', removal_date=''),
    'cz': GTLDPeriod(gtld='cz', delegation_date='1985-01-01', removal_date=''),
    'dabur': GTLDPeriod(gtld='dabur', delegation_date='1985-01-01', removal_date=''),
    'dad': GTLDPeriod(gtld='dad', delegation_date='1985-01-01', removal_date=''),
    'dance': GTLDPeriod(gtld='dance', delegation_date='1985-01-01', removal_date=''),
    'data': GTLDPeriod(gtld='data', delegation_date='1985-01-01', removal_date=''),
    'date': GTLDPeriod(gtld='date', delegation_date='1985-01-01', removal_date=''),
    'dating': GTLDPeriod(gtld='dating', delegation_date='1985-01-01', removal_date=''),
    'datsun': GTLDPeriod(gtld='datsun', delegation_date='1985-01-01', removal_date=''),
    'day': GTLDPeriod(gtld='day', delegation_date='1985-01-01', removal_date=''),
    'dclk': GTLDPeriod(gtld='dclk', delegation_date='1985-01-01', removal_date=''),
    'dds': GTLDPeriod(gtld='dds', delegation_date='1985-01-01', removal_date=''),
    'de': GTLDPeriod(gtld='de', delegation_date='1985-01-01', removal_date=''),
    'deal': GTLDPeriod(gtld='deal', delegation_date='1985-01-01', removal_date=''),
    'dealer': GTLDPeriod(gtld='dealer', delegation_date='1985-01-01', removal_date=''),
    'deals': GTLDPeriod(gtld='deals', delegation_date='1985-01-01', removal_date=''),
    'degree': GTLDPeriod(gtld='degree', delegation_date='1985-01-01', removal_date=''),
    'delivery': GTLDPeriod(gtld='delivery', delegation_date='1985-01-01', removal_date=''),
    'dell': GTLDPeriod(gtld='dell', delegation_date='1985-01-01', removal_date=''),
    'deloitte': GTLDPeriod(gtld='deloitte', delegation_date='1985-01-01', removal_date=''),
    'delta': GTLDPeriod(gtld='delta', delegation_date='1985-01-01', removal_date=''),
    'democrat': GTLDPeriod(gtld='democrat', delegation_date='1985-01-01', removal_date=''),
    'dental': GTLDPeriod(gtld='dental', delegation_date='1985-01-01', removal_date=''),
    'dentist': GTLDPeriod(gtld='dentist', delegation_date='1985-01-01', removal_date=''),
    'desi': GTLDPeriod(gtld='desi', delegation_date='1985-01-01', removal_date=''),
    'design': GTLDPeriod(gtld='design', delegation_date='1985-01-01', removal_date=''),
    'dev': GTLDPeriod(gtld='dev', delegation_date='1985-01-01', removal_date=''),
    'dhl': GTLDPeriod(gtld='dhl', delegation_date='1985-01-01', removal_date=''),
    'diamonds': GTLDPeriod(gtld='diamonds', delegation_date='1985-01-01', removal_date=''),
    'diet': GTLDPeriod(gtld='diet', delegation_date='1985-01-01', removal_date=''),
    'digital': GTLDPeriod(gtld='digital', delegation_date='1985-01-01', removal_date=''),
    'direct': GTLDPeriod(gtld='direct', delegation_date='1985-01-01', removal_date=''),
    'directory': GTLDPeriod(gtld='directory', delegation_date='1985-01-01', removal_date=''),
    'discount': GTLDPeriod(gtld='discount', delegation_date='1985-01-01', removal_date=''),
    'discover': GTLDPeriod(gtld='discover', delegation_date='1985-01-01', removal_date=''),
    'dish': GTLDPeriod(gtld='dish', delegation_date='1985-01-01', removal_date=''),
    'diy': GTLDPeriod(gtld='diy', delegation_date='1985-01-01', removal_date=''),
    'dj': GTLDPeriod(gtld='dj', delegation_date='1985-01-01', removal_date=''),
    'dk': GTLDPeriod(gtld='dk', delegation_date='1985-01-01', removal_date=''),
    'dm': GTLDPeriod(gtld='dm', delegation_date='1985-01-01', removal_date=''),
    'dnp': GTLDPeriod(gtld='dnp', delegation_date='1985-01-01', removal_date=''),
    'do': GTLDPeriod(gtld='do', delegation_date='1985-01-01', removal_date=''),
    'docs': GTLDPeriod(gtld='docs', delegation_date='1985-01-01', removal_date=''),
    'doctor': GTLDPeriod(gtld='doctor', delegation_date='1985-01-01', removal_date=''),
    'dog': GTLDPeriod(gtld='dog', delegation_date='1985-01-01', removal_date=''),
    'domains': GTLDPeriod(gtld='domains', delegation_date='1985-01-01', removal_date=''),
    'dot': GTLDPeriod(gtld='dot', delegation_date='1985-01-01', removal_date=''),
    'download': GTLDPeriod(gtld='download', delegation_date='1985-01-01', removal_date=''),
    'drive': GTLDPeriod(gtld='drive', delegation_date='1985-01-01', removal_date=''),
    'dtv': GTLDPeriod(gtld='dtv', delegation_date='1985-01-01', removal_date=''),
    'dubai': GTLDPeriod(gtld='dubai', delegation_date='1985-01-01', removal_date=''),
    'dunlop': GTLDPeriod(gtld='dunlop', delegation_date='1985-01-01', removal_date=''),
    'dupont': GTLDPeriod(gtld='dupont', delegation_date='1985-01-01', removal_date=''),
    'durban': GTLDPeriod(gtld='durban', delegation_date='1985-01-01', removal_date=''),
    'dvag': GTLDPeriod(gtld='dvag', delegation_date='1985-01-01', removal_date=''),
    'dvr': GTLDPeriod(gtld='dvr', delegation_date='1985-01-01', removal_date=''),
    'dz': GTLDPeriod(gtld='dz', delegation_date='1985-01-01', removal_date=''),
    'earth': GTLDPeriod(gtld='earth', delegation_date='1985-01-01', removal_date=''),
    'eat': GTLDPeriod(gtld='eat', delegation_date='1985-01-01', removal_date=''),
    'ec': GTLDPeriod(gtld='ec', delegation_date='1985-01-01', removal_date=''),
    'eco': GTLDPeriod(gtld='eco', delegation_date='1985-01-01', removal_date=''),
    'edeka': GTLDPeriod(gtld='edeka', delegation_date='1985-01-01', removal_date=''),
    'edu': GTLDPeriod(gtld='edu', delegation_date='1985-01-01', removal_date=''),
    'education': GTLDPeriod(gtld='education', delegation_date='1985-01-01', removal_date=''),
    'ee': GTLDPeriod(gtld='ee', delegation_date='1985-01-01', removal_date=''),
    'eg': GTLDPeriod(gtld='eg', delegation_date='1985-01-01', removal_date=''),
    'email': GTLDPeriod(gtld='email', delegation_date='1985-01-01', removal_date=''),
    'emerck': GTLDPeriod(gtld='emerck', delegation_date='1985-01-01', removal_date=''),
    'energy': GTLDPeriod(gtld='energy', delegation_date='1985-01-01', removal_date=''),
    'engineer': GTLDPeriod(gtld='engineer', delegation_date='1985-01-01', removal_date=''),
    'engineering': GTLDPeriod(gtld='engineering', delegation_date='1985-01-01', removal_date=''),
    'enterprises': GTLDPeriod(gtld='enterprises', delegation_date='1985-01-01', removal_date=''),
    'epson': GTLDPeriod(gtld='epson', delegation_date='1985-01-01', removal_date=''),
    'equipment': GTLDPeriod(gtld='equipment', delegation_date='1985-01-01', removal_date=''),
    'ericsson': GTLDPeriod(gtld='ericsson', delegation_date='1985-01-01', removal_date=''),
    'erni': GTLDPeriod(gtld='erni', delegation_date='1985-01-01', removal_date=''),
    'es': GTLDPeriod(gtld='es', delegation_date='1985-01-01', removal_date=''),
    'esq': GTLDPeriod(gtld='esq', delegation_date='1985-01-01', removal_date=''),
    'estate': GTLDPeriod(gtld='estate', delegation_date='1985-01-01', removal_date=''),
    'et': GTLDPeriod(gtld='et', delegation_date='1985-01-01', removal_date=''),
    'etisalat': GTLDPeriod(gtld='etisalat', delegation_date='1985-01-01', removal_date=''),
    'eu': GTLDPeriod(gtld='eu', delegation_date='1985-01-01', removal_date=''),
    'eurovision': GTLDPeriod(gtld='eurovision', delegation_date='1985-01-01', removal_date=''),
    'eus': GTLDPeriod(gtld='eus', delegation_date='1985-01-01', removal_date=''),
    'events': GTLDPeriod(gtld='events', delegation_date='1985-01-01', removal_date=''),
    'exchange': GTLDPeriod(gtld='exchange', delegation_date='1985-01-01', removal_date=''),
    'expert': GTLDPeriod(gtld='expert', delegation_date='1985-01-01', removal_date=''),
    'exposed': GTLDPeriod(gtld='exposed', delegation_date='1985-01-01', removal_date=''),
    'express': GTLDPeriod(gtld='express', delegation_date='1985-01-01', removal_date=''),
    'extraspace': GTLDPeriod(gtld='extraspace', delegation_date='1985-01-01', removal_date=''),
    'fage': GTLDPeriod(gtld='fage', delegation_date='1985-01-01', removal_date=''),
    'fail': GTLDPeriod(gtld='fail', delegation_date='1985-01-01', removal_date=''),
    'fairwinds': GTLDPeriod(gtld='fairwinds', delegation_date='1985-01-01', removal_date=''),
    'faith': GTLDPeriod(gtld='faith', delegation_date='1985-01-01', removal_date=''),
    'family': GTLDPeriod(gtld='family', delegation_date='1985-01-01', removal_date=''),
    'fan': GTLDPeriod(gtld='fan', delegation_date='1985-01-01', removal_date=''),
    'fans': GTLDPeriod(gtld='fans', delegation_date='1985-01-01', removal_date=''),
    'farm': GTLDPeriod(gtld='farm', delegation_date='1985-01-01', removal_date=''),
    'farmers': GTLDPeriod(gtld='farmers', delegation_date='1985-01-01', removal_date=''),
    'fashion': GTLDPeriod(gtld='fashion', delegation_date='1985-01-01', removal_date=''),
    'fast': GTLDPeriod(gtld='fast', delegation_date='1985-01-01', removal_date=''),
    'fedex': GTLDPeriod(gtld='fedex', delegation_date='1985-01-01', removal_date=''),
    'feedback': GTLDPeriod(gtld='feedback', delegation_date='1985-01-01', removal_date=''),
    'ferrari': GTLDPeriod(gtld='ferrari', delegation_date='1985-01-01', removal_date=''),
    'ferrero': GTLDPeriod(gtld='ferrero', delegation_date='1985-01-01', removal_date=''),
    'fi': GTLDPeriod(gtld='fi', delegation_date='1985-01-01', removal_date=''),
    'fiat': GTLDPeriod(gtld='fiat', delegation_date='1985-01-01', removal_date=''),
    'fidelity': GTLDPeriod(gtld='fidelity', delegation_date='1985-01-01', removal_date=''),
    'fido': GTLDPeriod(gtld='fido', delegation_date='1985-01-01', removal_date=''),
    'film': GTLDPeriod(gtld='film', delegation_date='1985-01-01', removal_date=''),
    'final': GTLDPeriod(gtld='final', delegation_date='1985-01-01', removal_date=''),
    'finance': GTLDPeriod(gtld='finance', delegation_date='1985-01-01', removal_date=''),
    'financial': GTLDPeriod(gtld='financial', delegation_date='1985-01-01', removal_date=''),
    'fire': GTLDPeriod(gtld='fire', delegation_date='1985-01-01', removal_date=''),
    'firestone': GTLDPeriod(gtld='firestone', delegation_date='1985-01-01', removal_date=''),
    'firmdale': GTLDPeriod(gtld='firmdale', delegation_date='1985-01-01', removal_date=''),
    'fish': GTLDPeriod(gtld='fish', delegation_date='1985-01-01', removal_date=''),
    'fishing': GTLDPeriod(gtld='fishing', delegation_date='1985-01-01', removal_date=''),
    'fit': GTLDPeriod(gtld='fit', delegation_date='1985-01-01', removal_date=''),
    'fitness': GTLDPeriod(gtld='fitness', delegation_date='1985-01-01', removal_date=''),
    'fj': GTLDPeriod(gtld='fj', delegation_date='1985-01-01', removal_date=''),
    'flickr': GTLDPeriod(gtld='flickr', delegation_date='1985-01-01', removal_date=''),
    'flights': GTLDPeriod(gtld='flights', delegation_date='1985-01-01', removal_date=''),
    'flir': GTLDPeriod(gtld='flir', delegation_date='1985-01-01', removal_date=''),
    'florist': GTLDPeriod(gtld='florist', delegation_date='1985-01-01', removal_date=''),
    'flowers': GTLDPeriod(gtld='flowers', delegation_date='1985-01-01', removal_date=''),
    'fly': GTLDPeriod(gtld='fly', delegation_date='1985-01-01', removal_date=''),
    'fm': GTLDPeriod(gtld='fm', delegation_date='1985-01-01', removal_date=''),
    'fo': GTLDPeriod(gtld='fo', delegation_date='1985-01-01', removal_date=''),
    'foo': GTLDPeriod(gtld='foo', delegation_date='1985-01-01', removal_date=''),
    'food': GTLDPeriod(gtld='food', delegation_date='1985-01-01', removal_date=''),
    'foodnetwork': GTLDPeriod(gtld='foodnetwork', delegation_date='1985-01-01', removal_date=''),
    'football': GTLDPeriod(gtld='football', delegation_date='1985-01-01', removal_date=''),
    'ford': GTLDPeriod(gtld='ford', delegation_date='1985-01-01', removal_date=''),
    'forex': GTLDPeriod(gtld='forex', delegation_date='1985-01-01', removal_date=''),
    'forsale': GTLDPeriod(gtld='forsale', delegation_date='1985-01-01', removal_date=''),
    'forum': GTLDPeriod(gtld='forum', delegation_date='1985-01-01', removal_date=''),
    'foundation': GTLDPeriod(gtld='foundation', delegation_date='1985-01-01', removal_date=''),
    'fox': GTLDPeriod(gtld='fox', delegation_date='1985-01-01', removal_date=''),
    'fr': GTLDPeriod(gtld='fr', delegation_date='1985-01-01', removal_date=''),
    'free': GTLDPeriod(gtld='free', delegation_date='1985-01-01', removal_date=''),
    'fresenius': GTLDPeriod(gtld='fresenius', delegation_date='1985-01-01', removal_date=''),
    'frl': GTLDPeriod(gtld='frl', delegation_date='1985-01-01', removal_date=''),
    'frogans': GTLDPeriod(gtld='frogans', delegation_date='1985-01-01', removal_date=''),
    'frontdoor': GTLDPeriod(gtld='frontdoor', delegation_date='1985-01-01', removal_date=''),
    'frontier': GTLDPeriod(gtld='frontier', delegation_date='1985-01-01', removal_date=''),
    'ftr': GTLDPeriod(gtld='ftr', delegation_date='1985-01-01', removal_date=''),
    'fujitsu': GTLDPeriod(gtld='fujitsu', delegation_date='1985-01-01', removal_date=''),
    'fun': GTLDPeriod(gtld='fun', delegation_date='1985-01-01', removal_date=''),
    'fund': GTLDPeriod(gtld='fund', delegation_date='1985-01-01', removal_date=''),
    'furniture': GTLDPeriod(gtld='furniture', delegation_date='1985-01-01', removal_date=''),
    'futbol': GTLDPeriod(gtld='futbol', delegation_date='1985-01-01', removal_date=''),
    'fyi': GTLDPeriod(gtld='fyi', delegation_date='1985-01-01', removal_date=''),
    'ga': GTLDPeriod(gtld='ga', delegation_date='1985-01-01', removal_date=''),
    'gal': GTLDPeriod(gtld='gal', delegation_date='1985-01-01', removal_date=''),
    'gallery': GTLDPeriod(gtld='gallery', delegation_date='1985-01-01', removal_date=''),
    'gallo': GTLDPeriod(gtld='gallo', delegation_date='1985-01-01', removal_date=''),
    'gallup': GTLDPeriod(gtld='gallup', delegation_date='1985-01-01', removal_date=''),
    'game': GTLDPeriod(gtld='game', delegation_date='1985-01-01', removal_date=''),
    'games': GTLDPeriod(gtld='games', delegation_date='1985-01-01', removal_date=''),
    'gap': GTLDPeriod(gtld='gap', delegation_date='1985-01-01', removal_date=''),
    'garden': GTLDPeriod(gtld='garden', delegation_date='1985-01-01', removal_date=''),
    'gay': GTLDPeriod(gtld='gay', delegation_date='1985-01-01', removal_date=''),
    'gb': GTLDPeriod(gtld='gb', delegation_date='1985-01-01', removal_date=''),
    'gbiz': GTLDPeriod(gtld='gbiz', delegation_date='1985-01-01', removal_date=''),
    'gd': GTLDPeriod(gtld='gd', delegation_date='1985-01-01', removal_date=''),
    'gdn': GTLDPeriod(gtld='gdn', delegation_date='1985-01-01', removal_date=''),
    'ge': GTLDPeriod(gtld='ge', delegation_date='1985-01-01', removal_date=''),
    'gea': GTLDPeriod(gtld='gea', delegation_date='1985-01-01', removal_date=''),
    'gent': GTLDPeriod(gtld='gent', delegation_date='1985-01-01', removal_date=''),
    'genting': GTLDPeriod(gtld='genting', delegation_date='1985-01-01', removal_date=''),
    'george': GTLDPeriod(gtld='george', delegation_date='1985-01-01', removal_date=''),
    'gf': GTLDPeriod(gtld='gf', delegation_date='1985-01-01', removal_date=''),
    'gg': GTLDPeriod(gtld='gg', delegation_date='1985-01-01', removal_date=''),
    'ggee': GTLDPeriod(gtld='ggee', delegation_date='1985-01-01', removal_date=''),
    'gh': GTLDPeriod(gtld='gh', delegation_date='1985-01-01', removal_date=''),
    'gi': GTLDPeriod(gtld='gi', delegation_date='1985-01-01', removal_date=''),
    'gift': GTLDPeriod(gtld='gift', delegation_date='1985-01-01', removal_date=''),
    'gifts': GTLDPeriod(gtld='gifts', delegation_date='1985-01-01', removal_date=''),
    'gives': GTLDPeriod(gtld='gives', delegation_date='1985-01-01', removal_date=''),
    'giving': GTLDPeriod(gtld='giving', delegation_date='1985-01-01', removal_date=''),
    'gl': GTLDPeriod(gtld='gl', delegation_date='1985-01-01', removal_date=''),
    'glass': GTLDPeriod(gtld='glass', delegation_date='1985-01-01', removal_date=''),
    'gle': GTLDPeriod(gtld='gle', delegation_date='1985-01-01', removal_date=''),
    'global': GTLDPeriod(gtld='global', delegation_date='1985-01-01', removal_date=''),
    'globo': GTLDPeriod(gtld='globo', delegation_date='1985-01-01', removal_date=''),
    'gm': GTLDPeriod(gtld='gm', delegation_date='1985-01-01', removal_date=''),
    'gmail': GTLDPeriod(gtld='gmail', delegation_date='1985-01-01', removal_date=''),
    'gmbh': GTLDPeriod(gtld='gmbh', delegation_date='1985-01-01', removal_date=''),
    'gmo': GTLDPeriod(gtld='gmo', delegation_date='1985-01-01', removal_date=''),
    'gmx': GTLDPeriod(gtld='gmx', delegation_date='1985-01-01', removal_date=''),
    'gn': GTLDPeriod(gtld='gn', delegation_date='1985-01-01', removal_date=''),
    'godaddy': GTLDPeriod(gtld='godaddy', delegation_date='1985-01-01', removal_date=''),
    'gold': GTLDPeriod(gtld='gold', delegation_date='1985-01-01', removal_date=''),
    'goldpoint': GTLDPeriod(gtld='goldpoint', delegation_date='1985-01-01', removal_date=''),
    'golf': GTLDPeriod(gtld='golf', delegation_date='1985-01-01', removal_date=''),
    'goo': GTLDPeriod(gtld='goo', delegation_date='1985-01-01', removal_date=''),
    'goodyear': GTLDPeriod(gtld='goodyear', delegation_date='1985-01-01', removal_date=''),
    'goog': GTLDPeriod(gtld='goog', delegation_date='1985-01-01', removal_date=''),
    'google': GTLDPeriod(gtld='google', delegation_date='1985-01-01', removal_date=''),
    'gop': GTLDPeriod(gtld='gop', delegation_date='1985-01-01', removal_date=''),
    'got': GTLDPeriod(gtld='got', delegation_date='1985-01-01', removal_date=''),
    'gov': GTLDPeriod(gtld='gov', delegation_date='1985-01-01', removal_date=''),
    'gp': GTLDPeriod(gtld='gp', delegation_date='1985-01-01', removal_date=''),
    'gq': GTLDPeriod(gtld='gq', delegation_date='1985-01-01', removal_date=''),
    'gr': GTLDPeriod(gtld='gr', delegation_date='1985-01-01', removal_date=''),
    'grainger': GTLDPeriod(gtld='grainger', delegation_date='1985-01-01', removal_date=''),
    'graphics': GTLDPeriod(gtld='graphics', delegation_date='1985-01-01', removal_date=''),
    'gratis': GTLDPeriod(gtld='gratis', delegation_date='1985-01-01', removal_date=''),
    'green': GTLDPeriod(gtld='green', delegation_date='1985-01-01', removal_date=''),
    'gripe': GTLDPeriod(gtld='gripe', delegation_date='1985-01-01', removal_date=''),
    'grocery': GTLDPeriod(gtld='grocery', delegation_date='1985-01-01', removal_date=''),
    'group': GTLDPeriod(gtld='group', delegation_date='1985-01-01', removal_date=''),
    'gs': GTLDPeriod(gtld='gs', delegation_date='1985-01-01', removal_date=''),
    'gt': GTLDPeriod(gtld='gt', delegation_date='1985-01-01', removal_date=''),
    'gu': GTLDPeriod(gtld='gu', delegation_date='1985-01-01', removal_date=''),
    'guardian': GTLDPeriod(gtld='guardian', delegation_date='1985-01-01', removal_date=''),
    'gucci': GTLDPeriod(gtld='gucci', delegation_date='1985-01-01', removal_date=''),
    'guge': GTLDPeriod(gtld='guge', delegation_date='1985-01-01', removal_date=''),
    'guide': GTLDPeriod(gtld='guide', delegation_date='1985-01-01', removal_date=''),
    'guitars': GTLDPeriod(gtld='guitars', delegation_date='1985-01-01', removal_date=''),
    'guru': GTLDPeriod(gtld='guru', delegation_date='1985-01-01', removal_date=''),
    'gw': GTLDPeriod(gtld='gw', delegation_date='1985-01-01', removal_date=''),
    'gy': GTLDPeriod(gtld='gy', delegation_date='1985-01-01', removal_date=''),
    'hair': GTLDPeriod(gtld='hair', delegation_date='1985-01-01', removal_date=''),
    'hamburg': GTLDPeriod(gtld='hamburg', delegation_date='1985-01-01', removal_date=''),
    'hangout': GTLDPeriod(gtld='hangout', delegation_date='1985-01-01', removal_date=''),
    'haus': GTLDPeriod(gtld='haus', delegation_date='1985-01-01', removal_date=''),
    'hbo': GTLDPeriod(gtld='hbo', delegation_date='1985-01-01', removal_date=''),
    'hdfc': GTLDPeriod(gtld='hdfc', delegation_date='1985-01-01', removal_date=''),
    'hdfcbank': GTLDPeriod(gtld='hdfcbank', delegation_date='1985-01-01', removal_date=''),
    'health': GTLDPeriod(gtld='health', delegation_date='1985-01-01', removal_date=''),
    'healthcare': GTLDPeriod(gtld='healthcare', delegation_date='1985-01-01', removal_date=''),
    'help': GTLDPeriod(gtld='help', delegation_date='1985-01-01', removal_date=''),
    'helsinki': GTLDPeriod(gtld='helsinki', delegation_date='1985-01-01', removal_date=''),
    'here': GTLDPeriod(gtld='here', delegation_date='1985-01-01', removal_date=''),
    'hermes': GTLDPeriod(gtld='hermes', delegation_date='1985-01-01', removal_date=''),
    'hgtv': GTLDPeriod(gtld='hgtv', delegation_date='1985-01-01', removal_date=''),
    'hiphop': GTLDPeriod(gtld='hiphop', delegation_date='1985-01-01', removal_date=''),
    'hisamitsu': GTLDPeriod(gtld='hisamitsu', delegation_date='1985-01-01', removal_date=''),
    'hitachi': GTLDPeriod(gtld='hitachi', delegation_date='1985-01-01', removal_date=''),
    'hiv': GTLDPeriod(gtld='hiv', delegation_date='1985-01-01', removal_date=''),
    'hk': GTLDPeriod(gtld='hk', delegation_date='1985-01-01', removal_date=''),
    'hkt': GTLDPeriod(gtld='hkt', delegation_date='1985-01-01', removal_date=''),
    'hm': GTLDPeriod(gtld='hm', delegation_date='1985-01-01', removal_date=''),
    'hn': GTLDPeriod(gtld='hn', delegation_date='1985-01-01', removal_date=''),
    'hockey': GTLDPeriod(gtld='hockey', delegation_date='1985-01-01', removal_date=''),
    'holdings': GTLDPeriod(gtld='holdings', delegation_date='1985-01-01', removal_date=''),
    'holiday': GTLDPeriod(gtld='holiday', delegation_date='1985-01-01', removal_date=''),
    'homedepot': GTLDPeriod(gtld='homedepot', delegation_date='1985-01-01', removal_date=''),
    'homegoods': GTLDPeriod(gtld='homegoods', delegation_date='1985-01-01', removal_date=''),
    'homes': GTLDPeriod(gtld='homes', delegation_date='1985-01-01', removal_date=''),
    'homesense': GTLDPeriod(gtld='homesense', delegation_date='1985-01-01', removal_date=''),
    'honda': GTLDPeriod(gtld='honda', delegation_date='1985-01-01', removal_date=''),
    'horse': GTLDPeriod(gtld='horse', delegation_date='1985-01-01', removal_date=''),
    'hospital': GTLDPeriod(gtld='hospital', delegation_date='1985-01-01', removal_date=''),
    'host': GTLDPeriod(gtld='host', delegation_date='1985-01-01', removal_date=''),
    'hosting': GTLDPeriod(gtld='hosting', delegation_date='1985-01-01', removal_date=''),
    'hot': GTLDPeriod(gtld='hot', delegation_date='1985-01-01', removal_date=''),
    'hoteles': GTLDPeriod(gtld='hoteles', delegation_date='1985-01-01', removal_date=''),
    'hotels': GTLDPeriod(gtld='hotels', delegation_date='1985-01-01', removal_date=''),
    'hotmail': GTLDPeriod(gtld='hotmail', delegation_date='1985-01-01', removal_date=''),
    'house': GTLDPeriod(gtld='house', delegation_date='1985-01-01', removal_date=''),
    'how': GTLDPeriod(gtld='how', delegation_date='1985-01-01', removal_date=''),
    'hr': GTLDPeriod(gtld='hr', delegation_date='1985-01-01', removal_date=''),
    'hsbc': GTLDPeriod(gtld='hsbc', delegation_date='1985-01-01', removal_date=''),
    'ht': GTLDPeriod(gtld='ht', delegation_date='1985-01-01', removal_date=''),
    'hu': GTLDPeriod(gtld='hu', delegation_date='1985-01-01', removal_date=''),
    'hughes': GTLDPeriod(gtld='hughes', delegation_date='1985-01-01', removal_date=''),
    'hyatt': GTLDPeriod(gtld='hyatt', delegation_date='1985-01-01', removal_date=''),
    'hyundai': GTLDPeriod(gtld='hyundai', delegation_date='1985-01-01', removal_date=''),
    'ibm': GTLDPeriod(gtld='ibm', delegation_date='1985-01-01', removal_date=''),
    'icbc': GTLDPeriod(gtld='icbc', delegation_date='1985-01-01', removal_date=''),
    'ice': GTLDPeriod(gtld='ice', delegation_date='1985-01-01', removal_date=''),
    'icu': GTLDPeriod(gtld='icu', delegation_date='1985-01-01', removal_date=''),
    'id': GTLDPeriod(gtld='id', delegation_date='1985-01-01', removal_date=''),
    'ie': GTLDPeriod(gtld='ie', delegation_date='1985-01-01', removal_date=''),
    'ieee': GTLDPeriod(gtld='ieee', delegation_date='1985-01-01', removal_date=''),
    'ifm': GTLDPeriod(gtld='ifm', delegation_date='1985-01-01', removal_date=''),
    'ikano': GTLDPeriod(gtld='ikano', delegation_date='1985-01-01', removal_date=''),
    'il': GTLDPeriod(gtld='il', delegation_date='1985-01-01', removal_date=''),
    'im': GTLDPeriod(gtld='im', delegation_date='1985-01-01', removal_date=''),
    'imamat': GTLDPeriod(gtld='imamat', delegation_date='1985-01-01', removal_date=''),
    'imdb': GTLDPeriod(gtld='imdb', delegation_date='1985-01-01', removal_date=''),
    'immo': GTLDPeriod(gtld='immo', delegation_date='1985-01-01', removal_date=''),
    'immobilien': GTLDPeriod(gtld='immobilien', delegation_date='1985-01-01', removal_date=''),
    'in': GTLDPeriod(gtld='in', delegation_date='1985-01-01', removal_date=''),
    'inc': GTLDPeriod(gtld='inc', delegation_date='1985-01-01', removal_date=''),
    'industries': GTLDPeriod(gtld='industries', delegation_date='1985-01-01', removal_date=''),
    'infiniti': GTLDPeriod(gtld='infiniti', delegation_date='1985-01-01', removal_date=''),
    'info': GTLDPeriod(gtld='info', delegation_date='2001-06-26', removal_date=''),
    'ing': GTLDPeriod(gtld='ing', delegation_date='1985-01-01', removal_date=''),
    'ink': GTLDPeriod(gtld='ink', delegation_date='1985-01-01', removal_date=''),
    'institute': GTLDPeriod(gtld='institute', delegation_date='1985-01-01', removal_date=''),
    'insurance': GTLDPeriod(gtld='insurance', delegation_date='1985-01-01', removal_date=''),
    'insure': GTLDPeriod(gtld='insure', delegation_date='1985-01-01', removal_date=''),
    'int': GTLDPeriod(gtld='int', delegation_date='1985-01-01', removal_date=''),
    'international': GTLDPeriod(gtld='international', delegation_date='1985-01-01', removal_date=''),
    'intuit': GTLDPeriod(gtld='intuit', delegation_date='1985-01-01', removal_date=''),
    'investments': GTLDPeriod(gtld='investments', delegation_date='1985-01-01', removal_date=''),
    'io': GTLDPeriod(gtld='io', delegation_date='1985-01-01', removal_date=''),
    'ipiranga': GTLDPeriod(gtld='ipiranga', delegation_date='1985-01-01', removal_date=''),
    'iq': GTLDPeriod(gtld='iq', delegation_date='1985-01-01', removal_date=''),
    'ir': GTLDPeriod(gtld='ir', delegation_date='1985-01-01', removal_date=''),
    'irish': GTLDPeriod(gtld='irish', delegation_date='1985-01-01', removal_date=''),
    'is': GTLDPeriod(gtld='is', delegation_date='1985-01-01', removal_date=''),
    'ismaili': GTLDPeriod(gtld='ismaili', delegation_date='1985-01-01', removal_date=''),
    'ist': GTLDPeriod(gtld='ist', delegation_date='1985-01-01', removal_date=''),
    'istanbul': GTLDPeriod(gtld='istanbul', delegation_date='1985-01-01', removal_date=''),
    'it': GTLDPeriod(gtld='it', delegation_date='1985-01-01', removal_date=''),
    'itau': GTLDPeriod(gtld='itau', delegation_date='1985-01-01', removal_date=''),
    'itv': GTLDPeriod(gtld='itv', delegation_date='1985-01-01', removal_date=''),
    'jaguar': GTLDPeriod(gtld='jaguar', delegation_date='1985-01-01', removal_date=''),
    'java': GTLDPeriod(gtld='java', delegation_date='1985-01-01', removal_date=''),
    'jcb': GTLDPeriod(gtld='jcb', delegation_date='1985-01-01', removal_date=''),
    'je': GTLDPeriod(gtld='je', delegation_date='1985-01-01', removal_date=''),
    'jeep': GTLDPeriod(gtld='jeep', delegation_date='1985-01-01', removal_date=''),
    'jetzt': GTLDPeriod(gtld='jetzt', delegation_date='1985-01-01', removal_date=''),
    'jewelry': GTLDPeriod(gtld='jewelry', delegation_date='1985-01-01', removal_date=''),
    'jio': GTLDPeriod(gtld='jio', delegation_date='1985-01-01', removal_date=''),
    'jll': GTLDPeriod(gtld='jll', delegation_date='1985-01-01', removal_date=''),
    'jmp': GTLDPeriod(gtld='jmp', delegation_date='1985-01-01', removal_date=''),
    'jnj': GTLDPeriod(gtld='jnj', delegation_date='1985-01-01', removal_date=''),
    'jo': GTLDPeriod(gtld='jo', delegation_date='1985-01-01', removal_date=''),
    'jobs': GTLDPeriod(gtld='jobs', delegation_date='1985-01-01', removal_date=''),
    'joburg': GTLDPeriod(gtld='joburg', delegation_date='1985-01-01', removal_date=''),
    'jot': GTLDPeriod(gtld='jot', delegation_date='1985-01-01', removal_date=''),
    'joy': GTLDPeriod(gtld='joy', delegation_date='1985-01-01', removal_date=''),
    'jp': GTLDPeriod(gtld='jp', delegation_date='1985-01-01', removal_date=''),
    'jpmorgan': GTLDPeriod(gtld='jpmorgan', delegation_date='1985-01-01', removal_date=''),
    'jprs': GTLDPeriod(gtld='jprs', delegation_date='1985-01-01', removal_date=''),
    'juegos': GTLDPeriod(gtld='juegos', delegation_date='1985-01-01', removal_date=''),
    'juniper': GTLDPeriod(gtld='juniper', delegation_date='1985-01-01', removal_date=''),
    'kaufen': GTLDPeriod(gtld='kaufen', delegation_date='1985-01-01', removal_date=''),
    'kddi': GTLDPeriod(gtld='kddi', delegation_date='1985-01-01', removal_date=''),
    'ke': GTLDPeriod(gtld='ke', delegation_date='1985-01-01', removal_date=''),
    'kerryhotels': GTLDPeriod(gtld='kerryhotels', delegation_date='1985-01-01', removal_date=''),
    'kerrylogistics': GTLDPeriod(gtld='kerrylogistics', delegation_date='1985-01-01', removal_date=''),
    'kerryproperties': GTLDPeriod(gtld='kerryproperties', delegation_date='1985-01-01', removal_date=''),
    'kfh': GTLDPeriod(gtld='kfh', delegation_date='1985-01-01', removal_date=''),
    'kg': GTLDPeriod(gtld='kg', delegation_date='1985-01-01', removal_date=''),
    'ki': GTLDPeriod(gtld='ki', delegation_date='1985-01-01', removal_date=''),
    'kia': GTLDPeriod(gtld='kia', delegation_date='1985-01-01', removal_date=''),
    'kids': GTLDPeriod(gtld='kids', delegation_date='1985-01-01', removal_date=''),
    'kim': GTLDPeriod(gtld='kim', delegation_date='1985-01-01', removal_date=''),
    'kinder': GTLDPeriod(gtld='kinder', delegation_date='1985-01-01', removal_date=''),
    'kindle': GTLDPeriod(gtld='kindle', delegation_date='1985-01-01', removal_date=''),
    'kitchen': GTLDPeriod(gtld='kitchen', delegation_date='1985-01-01', removal_date=''),
    'kiwi': GTLDPeriod(gtld='kiwi', delegation_date='1985-01-01', removal_date=''),
    'km': GTLDPeriod(gtld='km', delegation_date='1985-01-01', removal_date=''),
    'kn': GTLDPeriod(gtld='kn', delegation_date='1985-01-01', removal_date=''),
    'koeln': GTLDPeriod(gtld='koeln', delegation_date='1985-01-01', removal_date=''),
    'komatsu': GTLDPeriod(gtld='komatsu', delegation_date='1985-01-01', removal_date=''),
    'kosher': GTLDPeriod(gtld='kosher', delegation_date='1985-01-01', removal_date=''),
    'kp': GTLDPeriod(gtld='kp', delegation_date='1985-01-01', removal_date=''),
    'kpmg': GTLDPeriod(gtld='kpmg', delegation_date='1985-01-01', removal_date=''),
    'kpn': GTLDPeriod(gtld='kpn', delegation_date='1985-01-01', removal_date=''),
    'kr': GTLDPeriod(gtld='kr', delegation_date='1985-01-01', removal_date=''),
    'krd': GTLDPeriod(gtld='krd', delegation_date='1985-01-01', removal_date=''),
    'kred': GTLDPeriod(gtld='kred', delegation_date='1985-01-01', removal_date=''),
    'kuokgroup': GTLDPeriod(gtld='kuokgroup', delegation_date='1985-01-01', removal_date=''),
    'kw': GTLDPeriod(gtld='kw', delegation_date='1985-01-01', removal_date=''),
    'ky': GTLDPeriod(gtld='ky', delegation_date='1985-01-01', removal_date=''),
    'kyoto': GTLDPeriod(gtld='kyoto', delegation_date='1985-01-01', removal_date=''),
    'kz': GTLDPeriod(gtld='kz', delegation_date='1985-01-01', removal_date=''),
    'la': GTLDPeriod(gtld='la', delegation_date='1985-01-01', removal_date=''),
    'lacaixa': GTLDPeriod(gtld='lacaixa', delegation_date='1985-01-01', removal_date=''),
    'lamborghini': GTLDPeriod(gtld='lamborghini', delegation_date='1985-01-01', removal_date=''),
    'lamer': GTLDPeriod(gtld='lamer', delegation_date='1985-01-01', removal_date=''),
    'lancaster': GTLDPeriod(gtld='lancaster', delegation_date='1985-01-01', removal_date=''),
    'lancia': GTLDPeriod(gtld='lancia', delegation_date='1985-01-01', removal_date=''),
    'land': GTLDPeriod(gtld='land', delegation_date='1985-01-01', removal_date=''),
    'landrover': GTLDPeriod(gtld='landrover', delegation_date='1985-01-01', removal_date=''),
    'lanxess': GTLDPeriod(gtld='lanxess', delegation_date='1985-01-01', removal_date=''),
    'lasalle': GTLDPeriod(gtld='lasalle', delegation_date='1985-01-01', removal_date=''),
    'lat': GTLDPeriod(gtld='lat', delegation_date='1985-01-01', removal_date=''),
    'latino': GTLDPeriod(gtld='latino', delegation_date='1985-01-01', removal_date=''),
    'latrobe': GTLDPeriod(gtld='latrobe', delegation_date='1985-01-01', removal_date=''),
    'law': GTLDPeriod(gtld='law', delegation_date='1985-01-01', removal_date=''),
    'lawyer': GTLDPeriod(gtld='lawyer', delegation_date='1985-01-01', removal_date=''),
    'lb': GTLDPeriod(gtld='lb', delegation_date='1985-01-01', removal_date=''),
    'lc': GTLDPeriod(gtld='lc', delegation_date='1985-01-01', removal_date=''),
    'lds': GTLDPeriod(gtld='lds', delegation_date='1985-01-01', removal_date=''),
    'lease': GTLDPeriod(gtld='lease', delegation_date='1985-01-01', removal_date=''),
    'leclerc': GTLDPeriod(gtld='leclerc', delegation_date='1985-01-01', removal_date=''),
    'lefrak': GTLDPeriod(gtld='lefrak', delegation_date='1985-01-01', removal_date=''),
    'legal': GTLDPeriod(gtld='legal', delegation_date='1985-01-01', removal_date=''),
    'lego': GTLDPeriod(gtld='lego', delegation_date='1985-01-01', removal_date=''),
    'lexus': GTLDPeriod(gtld='lexus', delegation_date='1985-01-01', removal_date=''),
    'lgbt': GTLDPeriod(gtld='lgbt', delegation_date='1985-01-01', removal_date=''),
    'li': GTLDPeriod(gtld='li', delegation_date='1985-01-01', removal_date=''),
    'lidl': GTLDPeriod(gtld='lidl', delegation_date='1985-01-01', removal_date=''),
    'life': GTLDPeriod(gtld='life', delegation_date='1985-01-01', removal_date=''),
    'lifeinsurance': GTLDPeriod(gtld='lifeinsurance', delegation_date='1985-01-01', removal_date=''),
    'lifestyle': GTLDPeriod(gtld='lifestyle', delegation_date='1985-01-01', removal_date=''),
    'lighting': GTLDPeriod(gtld='lighting', delegation_date='1985-01-01', removal_date=''),
    'like': GTLDPeriod(gtld='like', delegation_date='1985-01-01', removal_date=''),
    'lilly': GTLDPeriod(gtld='lilly', delegation_date='1985-01-01', removal_date=''),
    'limited': GTLDPeriod(gtld='limited', delegation_date='1985-01-01', removal_date=''),
    'limo': GTLDPeriod(gtld='limo', delegation_date='1985-01-01', removal_date=''),
    'lincoln': GTLDPeriod(gtld='lincoln', delegation_date='1985-01-01', removal_date=''),
    'linde': GTLDPeriod(gtld='linde', delegation_date='1985-01-01', removal_date=''),
    'link': GTLDPeriod(gtld='link', delegation_date='1985-01-01', removal_date=''),
    'lipsy': GTLDPeriod(gtld='lipsy', delegation_date='1985-01-01', removal_date=''),
    'live': GTLDPeriod(gtld='live', delegation_date='1985-01-01', removal_date=''),
    'living': GTLDPeriod(gtld='living', delegation_date='1985-01-01', removal_date=''),
    'lk': GTLDPeriod(gtld='lk', delegation_date='1985-01-01', removal_date=''),
    'llc': GTLDPeriod(gtld='llc', delegation_date='1985-01-01', removal_date=''),
    'llp': GTLDPeriod(gtld='llp', delegation_date='1985-01-01', removal_date=''),
    'loan': GTLDPeriod(gtld='loan', delegation_date='1985-01-01', removal_date=''),
    'loans': GTLDPeriod(gtld='loans', delegation_date='1985-01-01', removal_date=''),
    'locker': GTLDPeriod(gtld='locker', delegation_date='1985-01-01', removal_date=''),
    'locus': GTLDPeriod(gtld='locus', delegation_date='1985-01-01', removal_date=''),
    'lol': GTLDPeriod(gtld='lol', delegation_date='1985-01-01', removal_date=''),
    'london': GTLDPeriod(gtld='london', delegation_date='1985-01-01', removal_date=''),
    'lotte': GTLDPeriod(gtld='lotte', delegation_date='1985-01-01', removal_date=''),
    'lotto': GTLDPeriod(gtld='lotto', delegation_date='1985-01-01', removal_date=''),
    'love': GTLDPeriod(gtld='love', delegation_date='1985-01-01', removal_date=''),
    'lpl': GTLDPeriod(gtld='lpl', delegation_date='1985-01-01', removal_date=''),
    'lplfinancial': GTLDPeriod(gtld='lplfinancial', delegation_date='1985-01-01', removal_date=''),
    'lr': GTLDPeriod(gtld='lr', delegation_date='1985-01-01', removal_date=''),
    'ls': GTLDPeriod(gtld='ls', delegation_date='1985-01-01', removal_date=''),
    'lt': GTLDPeriod(gtld='lt', delegation_date='1985-01-01', removal_date=''),
    'ltd': GTLDPeriod(gtld='ltd', delegation_date='1985-01-01', removal_date=''),
    'ltda': GTLDPeriod(gtld='ltda', delegation_date='1985-01-01', removal_date=''),
    'lu': GTLDPeriod(gtld='lu', delegation_date='1985-01-01', removal_date=''),
    'lundbeck': GTLDPeriod(gtld='lundbeck', delegation_date='1985-01-01', removal_date=''),
    'luxe': GTLDPeriod(gtld='luxe', delegation_date='1985-01-01', removal_date=''),
    'luxury': GTLDPeriod(gtld='luxury', delegation_date='1985-01-01', removal_date=''),
    'lv': GTLDPeriod(gtld='lv', delegation_date='1985-01-01', removal_date=''),
    'ly': GTLDPeriod(gtld='ly', delegation_date='1985-01-01', removal_date=''),
    'ma': GTLDPeriod(gtld='ma', delegation_date='1985-01-01', removal_date=''),
    'macys': GTLDPeriod(gtld='macys', delegation_date='1985-01-01', removal_date=''),
    'madrid': GTLDPeriod(gtld='madrid', delegation_date='1985-01-01', removal_date=''),
    'maif': GTLDPeriod(gtld='maif', delegation_date='1985-01-01', removal_date=''),
    'maison': GTLDPeriod(gtld='maison', delegation_date='1985-01-01', removal_date=''),
    'makeup': GTLDPeriod(gtld='makeup', delegation_date='1985-01-01', removal_date=''),
    'man': GTLDPeriod(gtld='man', delegation_date='1985-01-01', removal_date=''),
    'management': GTLDPeriod(gtld='management', delegation_date='1985-01-01', removal_date=''),
    'mango': GTLDPeriod(gtld='mango', delegation_date='1985-01-01', removal_date=''),
    'map': GTLDPeriod(gtld='map', delegation_date='1985-01-01', removal_date=''),
    'market': GTLDPeriod(gtld='market', delegation_date='1985-01-01', removal_date=''),
    'marketing': GTLDPeriod(gtld='marketing', delegation_date='1985-01-01', removal_date=''),
    'markets': GTLDPeriod(gtld='markets', delegation_date='1985-01-01', removal_date=''),
    'marriott': GTLDPeriod(gtld='marriott', delegation_date='1985-01-01', removal_date=''),
    'marshalls': GTLDPeriod(gtld='marshalls', delegation_date='1985-01-01', removal_date=''),
    'maserati': GTLDPeriod(gtld='maserati', delegation_date='1985-01-01', removal_date=''),
    'mattel': GTLDPeriod(gtld='mattel', delegation_date='1985-01-01', removal_date=''),
    'mba': GTLDPeriod(gtld='mba', delegation_date='1985-01-01', removal_date=''),
    'mc': GTLDPeriod(gtld='mc', delegation_date='1985-01-01', removal_date=''),
    'mckinsey': GTLDPeriod(gtld='mckinsey', delegation_date='1985-01-01', removal_date=''),
    'md': GTLDPeriod(gtld='md', delegation_date='1985-01-01', removal_date=''),
    'me': GTLDPeriod(gtld='me', delegation_date='1985-01-01', removal_date=''),
    'med': GTLDPeriod(gtld='med', delegation_date='1985-01-01', removal_date=''),
    'media': GTLDPeriod(gtld='media', delegation_date='1985-01-01', removal_date=''),
    'meet': GTLDPeriod(gtld='meet', delegation_date='1985-01-01', removal_date=''),
    'melbourne': GTLDPeriod(gtld='melbourne', delegation_date='1985-01-01', removal_date=''),
    'meme': GTLDPeriod(gtld='meme', delegation_date='1985-01-01', removal_date=''),
    'memorial': GTLDPeriod(gtld='memorial', delegation_date='1985-01-01', removal_date=''),
    'men': GTLDPeriod(gtld='men', delegation_date='1985-01-01', removal_date=''),
    'menu': GTLDPeriod(gtld='menu', delegation_date='1985-01-01', removal_date=''),
    'merckmsd': GTLDPeriod(gtld='merckmsd', delegation_date='1985-01-01', removal_date=''),
    'mg': GTLDPeriod(gtld='mg', delegation_date='1985-01-01', removal_date=''),
    'mh': GTLDPeriod(gtld='mh', delegation_date='1985-01-01', removal_date=''),
    'miami': GTLDPeriod(gtld='miami', delegation_date='1985-01-01', removal_date=''),
    'microsoft': GTLDPeriod(gtld='microsoft', delegation_date='1985-01-01', removal_date=''),
    'mil': GTLDPeriod(gtld='mil', delegation_date='1985-01-01', removal_date=''),
    'mini': GTLDPeriod(gtld='mini', delegation_date='1985-01-01', removal_date=''),
    'mint': GTLDPeriod(gtld='mint', delegation_date='1985-01-01', removal_date=''),
    'mit': GTLDPeriod(gtld='mit', delegation_date='1985-01-01', removal_date=''),
    'mitsubishi': GTLDPeriod(gtld='mitsubishi', delegation_date='1985-01-01', removal_date=''),
    'mk': GTLDPeriod(gtld='mk', delegation_date='1985-01-01', removal_date=''),
    'ml': GTLDPeriod(gtld='ml', delegation_date='1985-01-01', removal_date=''),
    'mlb': GTLDPeriod(gtld='mlb', delegation_date='1985-01-01', removal_date=''),
    'mls': GTLDPeriod(gtld='mls', delegation_date='1985-01-01', removal_date=''),
    'mma': GTLDPeriod(gtld='mma', delegation_date='1985-01-01', removal_date=''),
    'mn': GTLDPeriod(gtld='mn', delegation_date='1985-01-01', removal_date=''),
    'mo': GTLDPeriod(gtld='mo', delegation_date='1985-01-01', removal_date=''),
    'mobi': GTLDPeriod(gtld='mobi', delegation_date='1985-01-01', removal_date=''),
    'mobile': GTLDPeriod(gtld='mobile', delegation_date='1985-01-01', removal_date=''),
    'moda': GTLDPeriod(gtld='moda', delegation_date='1985-01-01', removal_date=''),
    'moe': GTLDPeriod(gtld='moe', delegation_date='1985-01-01', removal_date=''),
    'moi': GTLDPeriod(gtld='moi', delegation_date='1985-01-01', removal_date=''),
    'mom': GTLDPeriod(gtld='mom', delegation_date='1985-01-01', removal_date=''),
    'monash': GTLDPeriod(gtld='monash', delegation_date='1985-01-01', removal_date=''),
    'money': GTLDPeriod(gtld='money', delegation_date='1985-01-01', removal_date=''),
    'monster': GTLDPeriod(gtld='monster', delegation_date='1985-01-01', removal_date=''),
    'mormon': GTLDPeriod(gtld='mormon', delegation_date='1985-01-01', removal_date=''),
    'mortgage': GTLDPeriod(gtld='mortgage', delegation_date='1985-01-01', removal_date=''),
    'moscow': GTLDPeriod(gtld='moscow', delegation_date='1985-01-01', removal_date=''),
    'moto': GTLDPeriod(gtld='moto', delegation_date='1985-01-01', removal_date=''),
    'motorcycles': GTLDPeriod(gtld='motorcycles', delegation_date='1985-01-01', removal_date=''),
    'mov': GTLDPeriod(gtld='mov', delegation_date='1985-01-01', removal_date=''),
    'movie': GTLDPeriod(gtld='movie', delegation_date='1985-01-01', removal_date=''),
    'mp': GTLDPeriod(gtld='mp', delegation_date='1985-01-01', removal_date=''),
    'mq': GTLDPeriod(gtld='mq', delegation_date='1985-01-01', removal_date=''),
    'mr': GTLDPeriod(gtld='mr', delegation_date='1985-01-01', removal_date=''),
    'ms': GTLDPeriod(gtld='ms', delegation_date='1985-01-01', removal_date=''),
    'msd': GTLDPeriod(gtld='msd', delegation_date='1985-01-01', removal_date=''),
    'mt': GTLDPeriod(gtld='mt', delegation_date='1985-01-01', removal_date=''),
    'mtn': GTLDPeriod(gtld='mtn', delegation_date='1985-01-01', removal_date=''),
    'mtr': GTLDPeriod(gtld='mtr', delegation_date='1985-01-01', removal_date=''),
    'mu': GTLDPeriod(gtld='mu', delegation_date='1985-01-01', removal_date=''),
    'museum': GTLDPeriod(gtld='museum', delegation_date='1985-01-01', removal_date=''),
    'music': GTLDPeriod(gtld='music', delegation_date='1985-01-01', removal_date=''),
    'mutual': GTLDPeriod(gtld='mutual', delegation_date='1985-01-01', removal_date=''),
    'mv': GTLDPeriod(gtld='mv', delegation_date='1985-01-01', removal_date=''),
    'mw': GTLDPeriod(gtld='mw', delegation_date='1985-01-01', removal_date=''),
    'mx': GTLDPeriod(gtld='mx', delegation_date='1985-01-01', removal_date=''),
    'my': GTLDPeriod(gtld='my', delegation_date='1985-01-01', removal_date=''),
    'mz': GTLDPeriod(gtld='mz', delegation_date='1985-01-01', removal_date=''),
    'na': GTLDPeriod(gtld='na', delegation_date='1985-01-01', removal_date=''),
    'nab': GTLDPeriod(gtld='nab', delegation_date='1985-01-01', removal_date=''),
    'nagoya': GTLDPeriod(gtld='nagoya', delegation_date='1985-01-01', removal_date=''),
    'name': GTLDPeriod(gtld='name', delegation_date='1985-01-01', removal_date=''),
    'natura': GTLDPeriod(gtld='natura', delegation_date='1985-01-01', removal_date=''),
    'navy': GTLDPeriod(gtld='navy', delegation_date='1985-01-01', removal_date=''),
    'nba': GTLDPeriod(gtld='nba', delegation_date='1985-01-01', removal_date=''),
    'nc': GTLDPeriod(gtld='nc', delegation_date='1985-01-01', removal_date=''),
    'ne': GTLDPeriod(gtld='ne', delegation_date='1985-01-01', removal_date=''),
    'nec': GTLDPeriod(gtld='nec', delegation_date='1985-01-01', removal_date=''),
    'net': GTLDPeriod(gtld='net', delegation_date='1985-01-01', removal_date=''),
    'netbank': GTLDPeriod(gtld='netbank', delegation_date='1985-01-01', removal_date=''),
    'netflix': GTLDPeriod(gtld='netflix', delegation_date='1985-01-01', removal_date=''),
    'network': GTLDPeriod(gtld='network', delegation_date='1985-01-01', removal_date=''),
    'neustar': GTLDPeriod(gtld='neustar', delegation_date='1985-01-01', removal_date=''),
    'new': GTLDPeriod(gtld='new', delegation_date='1985-01-01', removal_date=''),
    'news': GTLDPeriod(gtld='news', delegation_date='1985-01-01', removal_date=''),
    'next': GTLDPeriod(gtld='next', delegation_date='1985-01-01', removal_date=''),
    'nextdirect': GTLDPeriod(gtld='nextdirect', delegation_date='1985-01-01', removal_date=''),
    'nexus': GTLDPeriod(gtld='nexus', delegation_date='1985-01-01', removal_date=''),
    'nf': GTLDPeriod(gtld='nf', delegation_date='1985-01-01', removal_date=''),
    'nfl': GTLDPeriod(gtld='nfl', delegation_date='1985-01-01', removal_date=''),
    'ng': GTLDPeriod(gtld='ng', delegation_date='1985-01-01', removal_date=''),
    'ngo': GTLDPeriod(gtld='ngo', delegation_date='1985-01-01', removal_date=''),
    'nhk': GTLDPeriod(gtld='nhk', delegation_date='1985-01-01', removal_date=''),
    'ni': GTLDPeriod(gtld='ni', delegation_date='1985-01-01', removal_date=''),
    'nico': GTLDPeriod(gtld='nico', delegation_date='1985-01-01', removal_date=''),
    'nike': GTLDPeriod(gtld='nike', delegation_date='1985-01-01', removal_date=''),
    'nikon': GTLDPeriod(gtld='nikon', delegation_date='1985-01-01', removal_date=''),
    'ninja': GTLDPeriod(gtld='ninja', delegation_date='1985-01-01', removal_date=''),
    'nissan': GTLDPeriod(gtld='nissan', delegation_date='1985-01-01', removal_date=''),
    'nissay': GTLDPeriod(gtld='nissay', delegation_date='1985-01-01', removal_date=''),
    'nl': GTLDPeriod(gtld='nl', delegation_date='1985-01-01', removal_date=''),
    'no': GTLDPeriod(gtld='no', delegation_date='1985-01-01', removal_date=''),
    'nokia': GTLDPeriod(gtld='nokia', delegation_date='1985-01-01', removal_date=''),
    'northwesternmutual': GTLDPeriod(gtld='northwesternmutual', delegation_date='1985-01-01', removal_date=''),
    'norton': GTLDPeriod(gtld='norton', delegation_date='1985-01-01', removal_date=''),
    'now': GTLDPeriod(gtld='now', delegation_date='1985-01-01', removal_date=''),
    'nowruz': GTLDPeriod(gtld='nowruz', delegation_date='1985-01-01', removal_date=''),
    'nowtv': GTLDPeriod(gtld='nowtv', delegation_date='1985-01-01', removal_date=''),
    'nr': GTLDPeriod(gtld='nr', delegation_date='1985-01-01', removal_date=''),
    'nra': GTLDPeriod(gtld='nra', delegation_date='1985-01-01', removal_date=''),
    'nrw': GTLDPeriod(gtld='nrw', delegation_date='1985-01-01', removal_date=''),
    'ntt': GTLDPeriod(gtld='ntt', delegation_date='1985-01-01', removal_date=''),
    'nu': GTLDPeriod(gtld='nu', delegation_date='1985-01-01', removal_date=''),
    'nyc': GTLDPeriod(gtld='nyc', delegation_date='1985-01-01', removal_date=''),
    'nz': GTLDPeriod(gtld='nz', delegation_date='1985-01-01', removal_date=''),
    'obi': GTLDPeriod(gtld='obi', delegation_date='1985-01-01', removal_date=''),
    'observer': GTLDPeriod(gtld='observer', delegation_date='1985-01-01', removal_date=''),
    'office': GTLDPeriod(gtld='office', delegation_date='1985-01-01', removal_date=''),
    'okinawa': GTLDPeriod(gtld='okinawa', delegation_date='1985-01-01', removal_date=''),
    'olayan': GTLDPeriod(gtld='olayan', delegation_date='1985-01-01', removal_date=''),
    'olayangroup': GTLDPeriod(gtld='olayangroup', delegation_date='1985-01-01', removal_date=''),
    'oldnavy': GTLDPeriod(gtld='oldnavy', delegation_date='1985-01-01', removal_date=''),
    'ollo': GTLDPeriod(gtld='ollo', delegation_date='1985-01-01', removal_date=''),
    'om': GTLDPeriod(gtld='om', delegation_date='1985-01-01', removal_date=''),
    'omega': GTLDPeriod(gtld='omega', delegation_date='1985-01-01', removal_date=''),
    'one': GTLDPeriod(gtld='one', delegation_date='1985-01-01', removal_date=''),
    'ong': GTLDPeriod(gtld='ong', delegation_date='1985-01-01', removal_date=''),
    'onl': GTLDPeriod(gtld='onl', delegation_date='1985-01-01', removal_date=''),
    'online': GTLDPeriod(gtld='online', delegation_date='1985-01-01', removal_date=''),
    'ooo': GTLDPeriod(gtld='ooo', delegation_date='1985-01-01', removal_date=''),
    'open': GTLDPeriod(gtld='open', delegation_date='1985-01-01', removal_date=''),
    'oracle': GTLDPeriod(gtld='oracle', delegation_date='1985-01-01', removal_date=''),
    'orange': GTLDPeriod(gtld='orange', delegation_date='1985-01-01', removal_date=''),
    'org': GTLDPeriod(gtld='org', delegation_date='1985-01-01', removal_date=''),
    'organic': GTLDPeriod(gtld='organic', delegation_date='1985-01-01', removal_date=''),
    'origins': GTLDPeriod(gtld='origins', delegation_date='1985-01-01', removal_date=''),
    'osaka': GTLDPeriod(gtld='osaka', delegation_date='1985-01-01', removal_date=''),
    'otsuka': GTLDPeriod(gtld='otsuka', delegation_date='1985-01-01', removal_date=''),
    'ott': GTLDPeriod(gtld='ott', delegation_date='1985-01-01', removal_date=''),
    'ovh': GTLDPeriod(gtld='ovh', delegation_date='1985-01-01', removal_date=''),
    'pa': GTLDPeriod(gtld='pa', delegation_date='1985-01-01', removal_date=''),
    'page': GTLDPeriod(gtld='page', delegation_date='1985-01-01', removal_date=''),
    'panasonic': GTLDPeriod(gtld='panasonic', delegation_date='1985-01-01', removal_date=''),
    'paris': GTLDPeriod(gtld='paris', delegation_date='1985-01-01', removal_date=''),
    'pars': GTLDPeriod(gtld='pars', delegation_date='1985-01-01', removal_date=''),
    'partners': GTLDPeriod(gtld='partners', delegation_date='1985-01-01', removal_date=''),
    'parts': GTLDPeriod(gtld='parts', delegation_date='1985-01-01', removal_date=''),
    'party': GTLDPeriod(gtld='party', delegation_date='1985-01-01', removal_date=''),
    'passagens': GTLDPeriod(gtld='passagens', delegation_date='1985-01-01', removal_date=''),
    'pay': GTLDPeriod(gtld='pay', delegation_date='1985-01-01', removal_date=''),
    'pccw': GTLDPeriod(gtld='pccw', delegation_date='1985-01-01', removal_date=''),
    'pe': GTLDPeriod(gtld='pe', delegation_date='1985-01-01', removal_date=''),
    'pet': GTLDPeriod(gtld='pet', delegation_date='1985-01-01', removal_date=''),
    'pf': GTLDPeriod(gtld='pf', delegation_date='1985-01-01', removal_date=''),
    'pfizer': GTLDPeriod(gtld='pfizer', delegation_date='1985-01-01', removal_date=''),
    'ph': GTLDPeriod(gtld='ph', delegation_date='1985-01-01', removal_date=''),
    'pharmacy': GTLDPeriod(gtld='pharmacy', delegation_date='1985-01-01', removal_date=''),
    'phd': GTLDPeriod(gtld='phd', delegation_date='1985-01-01', removal_date=''),
    'philips': GTLDPeriod(gtld='philips', delegation_date='1985-01-01', removal_date=''),
    'phone': GTLDPeriod(gtld='phone', delegation_date='1985-01-01', removal_date=''),
    'photo': GTLDPeriod(gtld='photo', delegation_date='1985-01-01', removal_date=''),
    'photography': GTLDPeriod(gtld='photography', delegation_date='1985-01-01', removal_date=''),
    'photos': GTLDPeriod(gtld='photos', delegation_date='1985-01-01', removal_date=''),
    'physio': GTLDPeriod(gtld='physio', delegation_date='1985-01-01', removal_date=''),
    'pics': GTLDPeriod(gtld='pics', delegation_date='1985-01-01', removal_date=''),
    'pictet': GTLDPeriod(gtld='pictet', delegation_date='1985-01-01', removal_date=''),
    'pictures': GTLDPeriod(gtld='pictures', delegation_date='1985-01-01', removal_date=''),
    'pid': GTLDPeriod(gtld='pid', delegation_date='1985-01-01', removal_date=''),
    'pin': GTLDPeriod(gtld='pin', delegation_date='1985-01-01', removal_date=''),
    'ping': GTLDPeriod(gtld='ping', delegation_date='1985-01-01', removal_date=''),
    'pink': GTLDPeriod(gtld='pink', delegation_date='1985-01-01', removal_date=''),
    'pioneer': GTLDPeriod(gtld='pioneer', delegation_date='1985-01-01', removal_date=''),
    'pizza': GTLDPeriod(gtld='pizza', delegation_date='1985-01-01', removal_date=''),
    'pk': GTLDPeriod(gtld='pk', delegation_date='1985-01-01', removal_date=''),
    'pl': GTLDPeriod(gtld='pl', delegation_date='1985-01-01', removal_date=''),
    'place': GTLDPeriod(gtld='place', delegation_date='1985-01-01', removal_date=''),
    'play': GTLDPeriod(gtld='play', delegation_date='1985-01-01', removal_date=''),
    'playstation': GTLDPeriod(gtld='playstation', delegation_date='1985-01-01', removal_date=''),
    'plumbing': GTLDPeriod(gtld='plumbing', delegation_date='1985-01-01', removal_date=''),
    'plus': GTLDPeriod(gtld='plus', delegation_date='1985-01-01', removal_date=''),
    'pm': GTLDPeriod(gtld='pm', delegation_date='1985-01-01', removal_date=''),
    'pn': GTLDPeriod(gtld='pn', delegation_date='1985-01-01', removal_date=''),
    'pnc': GTLDPeriod(gtld='pnc', delegation_date='1985-01-01', removal_date=''),
    'pohl': GTLDPeriod(gtld='pohl', delegation_date='1985-01-01', removal_date=''),
    'poker': GTLDPeriod(gtld='poker', delegation_date='1985-01-01', removal_date=''),
    'politie': GTLDPeriod(gtld='politie', delegation_date='1985-01-01', removal_date=''),
    'porn': GTLDPeriod(gtld='porn', delegation_date='1985-01-01', removal_date=''),
    'post': GTLDPeriod(gtld='post', delegation_date='1985-01-01', removal_date=''),
    'pr': GTLDPeriod(gtld='pr', delegation_date='1985-01-01', removal_date=''),
    'pramerica': GTLDPeriod(gtld='pramerica', delegation_date='1985-01-01', removal_date=''),
    'praxi': GTLDPeriod(gtld='praxi', delegation_date='1985-01-01', removal_date=''),
    'press': GTLDPeriod(gtld='press', delegation_date='1985-01-01', removal_date=''),
    'prime': GTLDPeriod(gtld='prime', delegation_date='1985-01-01', removal_date=''),
    'pro': GTLDPeriod(gtld='pro', delegation_date='1985-01-01', removal_date=''),
    'prod': GTLDPeriod(gtld='prod', delegation_date='1985-01-01', removal_date=''),
    'productions': GTLDPeriod(gtld='productions', delegation_date='1985-01-01', removal_date=''),
    'prof': GTLDPeriod(gtld='prof', delegation_date='1985-01-01', removal_date=''),
    'progressive': GTLDPeriod(gtld='progressive', delegation_date='1985-01-01', removal_date=''),
    'promo': GTLDPeriod(gtld='promo', delegation_date='1985-01-01', removal_date=''),
    'properties': GTLDPeriod(gtld='properties', delegation_date='1985-01-01', removal_date=''),
    'property': GTLDPeriod(gtld='property', delegation_date='1985-01-01', removal_date=''),
    'protection': GTLDPeriod(gtld='protection', delegation_date='1985-01-01', removal_date=''),
    'pru': GTLDPeriod(gtld='pru', delegation_date='1985-01-01', removal_date=''),
    'prudential': GTLDPeriod(gtld='prudential', delegation_date='1985-01-01', removal_date=''),
    'ps': GTLDPeriod(gtld='ps', delegation_date='1985-01-01', removal_date=''),
    'pt': GTLDPeriod(gtld='pt', delegation_date='1985-01-01', removal_date=''),
    'pub': GTLDPeriod(gtld='pub', delegation_date='1985-01-01', removal_date=''),
    'pw': GTLDPeriod(gtld='pw', delegation_date='1985-01-01', removal_date=''),
    'pwc': GTLDPeriod(gtld='pwc', delegation_date='1985-01-01', removal_date=''),
    'py': GTLDPeriod(gtld='py', delegation_date='1985-01-01', removal_date=''),
    'qa': GTLDPeriod(gtld='qa', delegation_date='1985-01-01', removal_date=''),
    'qpon': GTLDPeriod(gtld='qpon', delegation_date='1985-01-01', removal_date=''),
    'quebec': GTLDPeriod(gtld='quebec', delegation_date='1985-01-01', removal_date=''),
    'quest': GTLDPeriod(gtld='quest', delegation_date='1985-01-01', removal_date=''),
    'racing': GTLDPeriod(gtld='racing', delegation_date='1985-01-01', removal_date=''),
    'radio': GTLDPeriod(gtld='radio', delegation_date='1985-01-01', removal_date=''),
    're': GTLDPeriod(gtld='re', delegation_date='1985-01-01', removal_date=''),
    'read': GTLDPeriod(gtld='read', delegation_date='1985-01-01', removal_date=''),
    'realestate': GTLDPeriod(gtld='realestate', delegation_date='1985-01-01', removal_date=''),
    'realtor': GTLDPeriod(gtld='realtor', delegation_date='1985-01-01', removal_date=''),
    'realty': GTLDPeriod(gtld='realty', delegation_date='1985-01-01', removal_date=''),
    'recipes': GTLDPeriod(gtld='recipes', delegation_date='1985-01-01', removal_date=''),
    'red': GTLDPeriod(gtld='red', delegation_date='1985-01-01', removal_date=''),
    'redstone': GTLDPeriod(gtld='redstone', delegation_date='1985-01-01', removal_date=''),
    'redumbrella': GTLDPeriod(gtld='redumbrella', delegation_date='1985-01-01', removal_date=''),
    'rehab': GTLDPeriod(gtld='rehab', delegation_date='1985-01-01', removal_date=''),
    'reise': GTLDPeriod(gtld='reise', delegation_date='1985-01-01', removal_date=''),
    'reisen': GTLDPeriod(gtld='reisen', delegation_date='1985-01-01', removal_date=''),
    'reit': GTLDPeriod(gtld='reit', delegation_date='1985-01-01', removal_date=''),
    'reliance': GTLDPeriod(gtld='reliance', delegation_date='1985-01-01', removal_date=''),
    'ren': GTLDPeriod(gtld='ren', delegation_date='1985-01-01', removal_date=''),
    'rent': GTLDPeriod(gtld='rent', delegation_date='1985-01-01', removal_date=''),
    'rentals': GTLDPeriod(gtld='rentals', delegation_date='1985-01-01', removal_date=''),
    'repair': GTLDPeriod(gtld='repair', delegation_date='1985-01-01', removal_date=''),
    'report': GTLDPeriod(gtld='report', delegation_date='1985-01-01', removal_date=''),
    'republican': GTLDPeriod(gtld='republican', delegation_date='1985-01-01', removal_date=''),
    'rest': GTLDPeriod(gtld='rest', delegation_date='1985-01-01', removal_date=''),
    'restaurant': GTLDPeriod(gtld='restaurant', delegation_date='1985-01-01', removal_date=''),
    'review': GTLDPeriod(gtld='review', delegation_date='1985-01-01', removal_date=''),
    'reviews': GTLDPeriod(gtld='reviews', delegation_date='1985-01-01', removal_date=''),
    'rexroth': GTLDPeriod(gtld='rexroth', delegation_date='1985-01-01', removal_date=''),
    'rich': GTLDPeriod(gtld='rich', delegation_date='1985-01-01', removal_date=''),
    'richardli': GTLDPeriod(gtld='richardli', delegation_date='1985-01-01', removal_date=''),
    'ricoh': GTLDPeriod(gtld='ricoh', delegation_date='1985-01-01', removal_date=''),
    'ril': GTLDPeriod(gtld='ril', delegation_date='1985-01-01', removal_date=''),
    'rio': GTLDPeriod(gtld='rio', delegation_date='1985-01-01', removal_date=''),
    'rip': GTLDPeriod(gtld='rip', delegation_date='1985-01-01', removal_date=''),
    'ro': GTLDPeriod(gtld='ro', delegation_date='1985-01-01', removal_date=''),
    'rocher': GTLDPeriod(gtld='rocher', delegation_date='1985-01-01', removal_date=''),
    'rocks': GTLDPeriod(gtld='rocks', delegation_date='1985-01-01', removal_date=''),
    'rodeo': GTLDPeriod(gtld='rodeo', delegation_date='1985-01-01', removal_date=''),
    'rogers': GTLDPeriod(gtld='rogers', delegation_date='1985-01-01', removal_date=''),
    'room': GTLDPeriod(gtld='room', delegation_date='1985-01-01', removal_date=''),
    'rs': GTLDPeriod(gtld='rs', delegation_date='1985-01-01', removal_date=''),
    'rsvp': GTLDPeriod(gtld='rsvp', delegation_date='1985-01-01', removal_date=''),
    'ru': GTLDPeriod(gtld='ru', delegation_date='1985-01-01', removal_date=''),
    'rugby': GTLDPeriod(gtld='rugby', delegation_date='1985-01-01', removal_date=''),
    'ruhr': GTLDPeriod(gtld='ruhr', delegation_date='1985-01-01', removal_date=''),
    'run': GTLDPeriod(gtld='run', delegation_date='1985-01-01', removal_date=''),
    'rw': GTLDPeriod(gtld='rw', delegation_date='1985-01-01', removal_date=''),
    'rwe': GTLDPeriod(gtld='rwe', delegation_date='1985-01-01', removal_date=''),
    'ryukyu': GTLDPeriod(gtld='ryukyu', delegation_date='1985-01-01', removal_date=''),
    'sa': GTLDPeriod(gtld='sa', delegation_date='1985-01-01', removal_date=''),
    'saarland': GTLDPeriod(gtld='saarland', delegation_date='1985-01-01', removal_date=''),
    'safe': GTLDPeriod(gtld='safe', delegation_date='1985-01-01', removal_date=''),
    'safety': GTLDPeriod(gtld='safety', delegation_date='1985-01-01', removal_date=''),
    'sakura': GTLDPeriod(gtld='sakura', delegation_date='1985-01-01', removal_date=''),
    'sale': GTLDPeriod(gtld='sale', delegation_date='1985-01-01', removal_date=''),
    'salon': GTLDPeriod(gtld='salon', delegation_date='1985-01-01', removal_date=''),
    'samsclub': GTLDPeriod(gtld='samsclub', delegation_date='1985-01-01', removal_date=''),
    'samsung': GTLDPeriod(gtld='samsung', delegation_date='1985-01-01', removal_date=''),
    'sandvik': GTLDPeriod(gtld='sandvik', delegation_date='1985-01-01', removal_date=''),
    'sandvikcoromant': GTLDPeriod(gtld='sandvikcoromant', delegation_date='1985-01-01', removal_date=''),
    'sanofi': GTLDPeriod(gtld='sanofi', delegation_date='1985-01-01', removal_date=''),
    'sap': GTLDPeriod(gtld='sap', delegation_date='1985-01-01', removal_date=''),
    'sarl': GTLDPeriod(gtld='sarl', delegation_date='1985-01-01', removal_date=''),
    'sas': GTLDPeriod(gtld='sas', delegation_date='1985-01-01', removal_date=''),
    'save': GTLDPeriod(gtld='save', delegation_date='1985-01-01', removal_date=''),
    'saxo': GTLDPeriod(gtld='saxo', delegation_date='1985-01-01', removal_date=''),
    'sb': GTLDPeriod(gtld='sb', delegation_date='1985-01-01', removal_date=''),
    'sbi': GTLDPeriod(gtld='sbi', delegation_date='1985-01-01', removal_date=''),
    'sbs': GTLDPeriod(gtld='sbs', delegation_date='1985-01-01', removal_date=''),
    'sc': GTLDPeriod(gtld='sc', delegation_date='1985-01-01', removal_date=''),
    'sca': GTLDPeriod(gtld='sca', delegation_date='1985-01-01', removal_date=''),
    'scb': GTLDPeriod(gtld='scb', delegation_date='1985-01-01', removal_date=''),
    'schaeffler': GTLDPeriod(gtld='schaeffler', delegation_date='1985-01-01', removal_date=''),
    'schmidt': GTLDPeriod(gtld='schmidt', delegation_date='1985-01-01', removal_date=''),
    'scholarships': GTLDPeriod(gtld='scholarships', delegation_date='1985-01-01', removal_date=''),
    'school': GTLDPeriod(gtld='school', delegation_date='1985-01-01', removal_date=''),
    'schule': GTLDPeriod(gtld='schule', delegation_date='1985-01-01', removal_date=''),
    'schwarz': GTLDPeriod(gtld='schwarz', delegation_date='1985-01-01', removal_date=''),
    'science': GTLDPeriod(gtld='science', delegation_date='1985-01-01', removal_date=''),
    'scot': GTLDPeriod(gtld='scot', delegation_date='1985-01-01', removal_date=''),
    'sd': GTLDPeriod(gtld='sd', delegation_date='1985-01-01', removal_date=''),
    'se': GTLDPeriod(gtld='se', delegation_date='1985-01-01', removal_date=''),
    'search': GTLDPeriod(gtld='search', delegation_date='1985-01-01', removal_date=''),
    'seat': GTLDPeriod(gtld='seat', delegation_date='1985-01-01', removal_date=''),
    'secure': GTLDPeriod(gtld='secure', delegation_date='1985-01-01', removal_date=''),
    'security': GTLDPeriod(gtld='security', delegation_date='1985-01-01', removal_date=''),
    'seek': GTLDPeriod(gtld='seek', delegation_date='1985-01-01', removal_date=''),
    'select': GTLDPeriod(gtld='select', delegation_date='1985-01-01', removal_date=''),
    'sener': GTLDPeriod(gtld='sener', delegation_date='1985-01-01', removal_date=''),
    'services': GTLDPeriod(gtld='services', delegation_date='1985-01-01', removal_date=''),
    'seven': GTLDPeriod(gtld='seven', delegation_date='1985-01-01', removal_date=''),
    'sew': GTLDPeriod(gtld='sew', delegation_date='1985-01-01', removal_date=''),
    'sex': GTLDPeriod(gtld='sex', delegation_date='1985-01-01', removal_date=''),
    'sexy': GTLDPeriod(gtld='sexy', delegation_date='1985-01-01', removal_date=''),
    'sfr': GTLDPeriod(gtld='sfr', delegation_date='1985-01-01', removal_date=''),
    'sg': GTLDPeriod(gtld='sg', delegation_date='1985-01-01', removal_date=''),
    'sh': GTLDPeriod(gtld='sh', delegation_date='1985-01-01', removal_date=''),
    'shangrila': GTLDPeriod(gtld='shangrila', delegation_date='1985-01-01', removal_date=''),
    'sharp': GTLDPeriod(gtld='sharp', delegation_date='1985-01-01', removal_date=''),
    'shaw': GTLDPeriod(gtld='shaw', delegation_date='1985-01-01', removal_date=''),
    'shell': GTLDPeriod(gtld='shell', delegation_date='1985-01-01', removal_date=''),
    'shia': GTLDPeriod(gtld='shia', delegation_date='1985-01-01', removal_date=''),
    'shiksha': GTLDPeriod(gtld='shiksha', delegation_date='1985-01-01', removal_date=''),
    'shoes': GTLDPeriod(gtld='shoes', delegation_date='1985-01-01', removal_date=''),
    'shop': GTLDPeriod(gtld='shop', delegation_date='1985-01-01', removal_date=''),
    'shopping': GTLDPeriod(gtld='shopping', delegation_date='1985-01-01', removal_date=''),
    'shouji': GTLDPeriod(gtld='shouji', delegation_date='1985-01-01', removal_date=''),
    'show': GTLDPeriod(gtld='show', delegation_date='1985-01-01', removal_date=''),
    'showtime': GTLDPeriod(gtld='showtime', delegation_date='1985-01-01', removal_date=''),
    'si': GTLDPeriod(gtld='si', delegation_date='1985-01-01', removal_date=''),
    'silk': GTLDPeriod(gtld='silk', delegation_date='1985-01-01', removal_date=''),
    'sina': GTLDPeriod(gtld='sina', delegation_date='1985-01-01', removal_date=''),
    'singles': GTLDPeriod(gtld='singles', delegation_date='1985-01-01', removal_date=''),
    'site': GTLDPeriod(gtld='site', delegation_date='1985-01-01', removal_date=''),
    'sj': GTLDPeriod(gtld='sj', delegation_date='1985-01-01', removal_date=''),
    'sk': GTLDPeriod(gtld='sk', delegation_date='1985-01-01', removal_date=''),
    'ski': GTLDPeriod(gtld='ski', delegation_date='1985-01-01', removal_date=''),
    'skin': GTLDPeriod(gtld='skin', delegation_date='1985-01-01', removal_date=''),
    'sky': GTLDPeriod(gtld='sky', delegation_date='1985-01-01', removal_date=''),
    'skype': GTLDPeriod(gtld='skype', delegation_date='1985-01-01', removal_date=''),
    'sl': GTLDPeriod(gtld='sl', delegation_date='1985-01-01', removal_date=''),
    'sling': GTLDPeriod(gtld='sling', delegation_date='1985-01-01', removal_date=''),
    'sm': GTLDPeriod(gtld='sm', delegation_date='1985-01-01', removal_date=''),
    'smart': GTLDPeriod(gtld='smart', delegation_date='1985-01-01', removal_date=''),
    'smile': GTLDPeriod(gtld='smile', delegation_date='1985-01-01', removal_date=''),
    'sn': GTLDPeriod(gtld='sn', delegation_date='1985-01-01', removal_date=''),
    'sncf': GTLDPeriod(gtld='sncf', delegation_date='1985-01-01', removal_date=''),
    'so': GTLDPeriod(gtld='so', delegation_date='1985-01-01', removal_date=''),
    'soccer': GTLDPeriod(gtld='soccer', delegation_date='1985-01-01', removal_date=''),
    'social': GTLDPeriod(gtld='social', delegation_date='1985-01-01', removal_date=''),
    'softbank': GTLDPeriod(gtld='softbank', delegation_date='1985-01-01', removal_date=''),
    'software': GTLDPeriod(gtld='software', delegation_date='1985-01-01', removal_date=''),
    'sohu': GTLDPeriod(gtld='sohu', delegation_date='1985-01-01', removal_date=''),
    'solar': GTLDPeriod(gtld='solar', delegation_date='1985-01-01', removal_date=''),
    'solutions': GTLDPeriod(gtld='solutions', delegation_date='1985-01-01', removal_date=''),
    'song': GTLDPeriod(gtld='song', delegation_date='1985-01-01', removal_date=''),
    'sony': GTLDPeriod(gtld='sony', delegation_date='1985-01-01', removal_date=''),
    'soy': GTLDPeriod(gtld='soy', delegation_date='1985-01-01', removal_date=''),
    'spa': GTLDPeriod(gtld='spa', delegation_date='1985-01-01', removal_date=''),
    'space': GTLDPeriod(gtld='space', delegation_date='1985-01-01', removal_date=''),
    'sport': GTLDPeriod(gtld='sport', delegation_date='1985-01-01', removal_date=''),
    'spot': GTLDPeriod(gtld='spot', delegation_date='1985-01-01', removal_date=''),
    'sr': GTLDPeriod(gtld='sr', delegation_date='1985-01-01', removal_date=''),
    'srl': GTLDPeriod(gtld='srl', delegation_date='1985-01-01', removal_date=''),
    'ss': GTLDPeriod(gtld='ss', delegation_date='1985-01-01', removal_date=''),
    'st': GTLDPeriod(gtld='st', delegation_date='1985-01-01', removal_date=''),
    'stada': GTLDPeriod(gtld='stada', delegation_date='1985-01-01', removal_date=''),
    'staples': GTLDPeriod(gtld='staples', delegation_date='1985-01-01', removal_date=''),
    'star': GTLDPeriod(gtld='star', delegation_date='1985-01-01', removal_date=''),
    'statebank': GTLDPeriod(gtld='statebank', delegation_date='1985-01-01', removal_date=''),
    'statefarm': GTLDPeriod(gtld='statefarm', delegation_date='1985-01-01', removal_date=''),
    'stc': GTLDPeriod(gtld='stc', delegation_date='1985-01-01', removal_date=''),
    'stcgroup': GTLDPeriod(gtld='stcgroup', delegation_date='1985-01-01', removal_date=''),
    'stockholm': GTLDPeriod(gtld='stockholm', delegation_date='1985-01-01', removal_date=''),
    'storage': GTLDPeriod(gtld='storage', delegation_date='1985-01-01', removal_date=''),
    'store': GTLDPeriod(gtld='store', delegation_date='1985-01-01', removal_date=''),
    'stream': GTLDPeriod(gtld='stream', delegation_date='1985-01-01', removal_date=''),
    'studio': GTLDPeriod(gtld='studio', delegation_date='1985-01-01', removal_date=''),
    'study': GTLDPeriod(gtld='study', delegation_date='1985-01-01', removal_date=''),
    'style': GTLDPeriod(gtld='style', delegation_date='1985-01-01', removal_date=''),
    'su': GTLDPeriod(gtld='su', delegation_date='1985-01-01', removal_date=''),
    'sucks': GTLDPeriod(gtld='sucks', delegation_date='1985-01-01', removal_date=''),
    'supplies': GTLDPeriod(gtld='supplies', delegation_date='1985-01-01', removal_date=''),
    'supply': GTLDPeriod(gtld='supply', delegation_date='1985-01-01', removal_date=''),
    'support': GTLDPeriod(gtld='support', delegation_date='1985-01-01', removal_date=''),
    'surf': GTLDPeriod(gtld='surf', delegation_date='1985-01-01', removal_date=''),
    'surgery': GTLDPeriod(gtld='surgery', delegation_date='1985-01-01', removal_date=''),
    'suzuki': GTLDPeriod(gtld='suzuki', delegation_date='1985-01-01', removal_date=''),
    'sv': GTLDPeriod(gtld='sv', delegation_date='1985-01-01', removal_date=''),
    'swatch': GTLDPeriod(gtld='swatch', delegation_date='1985-01-01', removal_date=''),
    'swiss': GTLDPeriod(gtld='swiss', delegation_date='1985-01-01', removal_date=''),
    'sx': GTLDPeriod(gtld='sx', delegation_date='1985-01-01', removal_date=''),
    'sy': GTLDPeriod(gtld='sy', delegation_date='1985-01-01', removal_date=''),
    'sydney': GTLDPeriod(gtld='sydney', delegation_date='1985-01-01', removal_date=''),
    'systems': GTLDPeriod(gtld='systems', delegation_date='1985-01-01', removal_date=''),
    'sz': GTLDPeriod(gtld='sz', delegation_date='1985-01-01', removal_date=''),
    'tab': GTLDPeriod(gtld='tab', delegation_date='1985-01-01', removal_date=''),
    'taipei': GTLDPeriod(gtld='taipei', delegation_date='1985-01-01', removal_date=''),
    'talk': GTLDPeriod(gtld='talk', delegation_date='1985-01-01', removal_date=''),
    'taobao': GTLDPeriod(gtld='taobao', delegation_date='1985-01-01', removal_date=''),
    'target': GTLDPeriod(gtld='target', delegation_date='1985-01-01', removal_date=''),
    'tatamotors': GTLDPeriod(gtld='tatamotors', delegation_date='1985-01-01', removal_date=''),
    'tatar': GTLDPeriod(gtld='tatar', delegation_date='1985-01-01', removal_date=''),
    'tattoo': GTLDPeriod(gtld='tattoo', delegation_date='1985-01-01', removal_date=''),
    'tax': GTLDPeriod(gtld='tax', delegation_date='1985-01-01', removal_date=''),
    'taxi': GTLDPeriod(gtld='taxi', delegation_date='1985-01-01', removal_date=''),
    'tc': GTLDPeriod(gtld='tc', delegation_date='1985-01-01', removal_date=''),
    'tci': GTLDPeriod(gtld='tci', delegation_date='1985-01-01', removal_date=''),
    'td': GTLDPeriod(gtld='td', delegation_date='1985-01-01', removal_date=''),
    'tdk': GTLDPeriod(gtld='tdk', delegation_date='1985-01-01', removal_date=''),
    'team': GTLDPeriod(gtld='team', delegation_date='1985-01-01', removal_date=''),
    'tech': GTLDPeriod(gtld='tech', delegation_date='1985-01-01', removal_date=''),
    'technology': GTLDPeriod(gtld='technology', delegation_date='1985-01-01', removal_date=''),
    'tel': GTLDPeriod(gtld='tel', delegation_date='1985-01-01', removal_date=''),
    'temasek': GTLDPeriod(gtld='temasek', delegation_date='1985-01-01', removal_date=''),
    'tennis': GTLDPeriod(gtld='tennis', delegation_date='1985-01-01', removal_date=''),
    'teva': GTLDPeriod(gtld='teva', delegation_date='1985-01-01', removal_date=''),
    'tf': GTLDPeriod(gtld='tf', delegation_date='1985-01-01', removal_date=''),
    'tg': GTLDPeriod(gtld='tg', delegation_date='1985-01-01', removal_date=''),
    'th': GTLDPeriod(gtld='th', delegation_date='1985-01-01', removal_date=''),
    'thd': GTLDPeriod(gtld='thd', delegation_date='1985-01-01', removal_date=''),
    'theater': GTLDPeriod(gtld='theater', delegation_date='1985-01-01', removal_date=''),
    'theatre': GTLDPeriod(gtld='theatre', delegation_date='1985-01-01', removal_date=''),
    'tiaa': GTLDPeriod(gtld='tiaa', delegation_date='1985-01-01', removal_date=''),
    'tickets': GTLDPeriod(gtld='tickets', delegation_date='1985-01-01', removal_date=''),
    'tienda': GTLDPeriod(gtld='tienda', delegation_date='1985-01-01', removal_date=''),
    'tiffany': GTLDPeriod(gtld='tiffany', delegation_date='1985-01-01', removal_date=''),
    'tips': GTLDPeriod(gtld='tips', delegation_date='1985-01-01', removal_date=''),
    'tires': GTLDPeriod(gtld='tires', delegation_date='1985-01-01', removal_date=''),
    'tirol': GTLDPeriod(gtld='tirol', delegation_date='1985-01-01', removal_date=''),
    'tj': GTLDPeriod(gtld='tj', delegation_date='1985-01-01', removal_date=''),
    'tjmaxx': GTLDPeriod(gtld='tjmaxx', delegation_date='1985-01-01', removal_date=''),
    'tjx': GTLDPeriod(gtld='tjx', delegation_date='1985-01-01', removal_date=''),
    'tk': GTLDPeriod(gtld='tk', delegation_date='1985-01-01', removal_date=''),
    'tkmaxx': GTLDPeriod(gtld='tkmaxx', delegation_date='1985-01-01', removal_date=''),
    'tl': GTLDPeriod(gtld='tl', delegation_date='1985-01-01', removal_date=''),
    'tm': GTLDPeriod(gtld='tm', delegation_date='1985-01-01', removal_date=''),
    'tmall': GTLDPeriod(gtld='tmall', delegation_date='1985-01-01', removal_date=''),
    'tn': GTLDPeriod(gtld='tn', delegation_date='1985-01-01', removal_date=''),
    'to': GTLDPeriod(gtld='to', delegation_date='1985-01-01', removal_date=''),
    'today': GTLDPeriod(gtld='today', delegation_date='1985-01-01', removal_date=''),
    'tokyo': GTLDPeriod(gtld='tokyo', delegation_date='1985-01-01', removal_date=''),
    'tools': GTLDPeriod(gtld='tools', delegation_date='1985-01-01', removal_date=''),
    'top': GTLDPeriod(gtld='top', delegation_date='1985-01-01', removal_date=''),
    'toray': GTLDPeriod(gtld='toray', delegation_date='1985-01-01', removal_date=''),
    'toshiba': GTLDPeriod(gtld='toshiba', delegation_date='1985-01-01', removal_date=''),
    'total': GTLDPeriod(gtld='total', delegation_date='1985-01-01', removal_date=''),
    'tours': GTLDPeriod(gtld='tours', delegation_date='1985-01-01', removal_date=''),
    'town': GTLDPeriod(gtld='town', delegation_date='1985-01-01', removal_date=''),
    'toyota': GTLDPeriod(gtld='toyota', delegation_date='1985-01-01', removal_date=''),
    'toys': GTLDPeriod(gtld='toys', delegation_date='1985-01-01', removal_date=''),
    'tr': GTLDPeriod(gtld='tr', delegation_date='1985-01-01', removal_date=''),
    'trade': GTLDPeriod(gtld='trade', delegation_date='1985-01-01', removal_date=''),
    'trading': GTLDPeriod(gtld='trading', delegation_date='1985-01-01', removal_date=''),
    'training': GTLDPeriod(gtld='training', delegation_date='1985-01-01', removal_date=''),
    'travel': GTLDPeriod(gtld='travel', delegation_date='1985-01-01', removal_date=''),
    'travelchannel': GTLDPeriod(gtld='travelchannel', delegation_date='1985-01-01', removal_date=''),
    'travelers': GTLDPeriod(gtld='travelers', delegation_date='1985-01-01', removal_date=''),
    'travelersinsurance': GTLDPeriod(gtld='travelersinsurance', delegation_date='1985-01-01', removal_date=''),
    'trust': GTLDPeriod(gtld='trust', delegation_date='1985-01-01', removal_date=''),
    'trv': GTLDPeriod(gtld='trv', delegation_date='1985-01-01', removal_date=''),
    'tt': GTLDPeriod(gtld='tt', delegation_date='1985-01-01', removal_date=''),
    'tube': GTLDPeriod(gtld='tube', delegation_date='1985-01-01', removal_date=''),
    'tui': GTLDPeriod(gtld='tui', delegation_date='1985-01-01', removal_date=''),
    'tunes': GTLDPeriod(gtld='tunes', delegation_date='1985-01-01', removal_date=''),
    'tushu': GTLDPeriod(gtld='tushu', delegation_date='1985-01-01', removal_date=''),
    'tv': GTLDPeriod(gtld='tv', delegation_date='1985-01-01', removal_date=''),
    'tvs': GTLDPeriod(gtld='tvs', delegation_date='1985-01-01', removal_date=''),
    'tw': GTLDPeriod(gtld='tw', delegation_date='1985-01-01', removal_date=''),
    'tz': GTLDPeriod(gtld='tz', delegation_date='1985-01-01', removal_date=''),
    'ua': GTLDPeriod(gtld='ua', delegation_date='1985-01-01', removal_date=''),
    'ubank': GTLDPeriod(gtld='ubank', delegation_date='1985-01-01', removal_date=''),
    'ubs': GTLDPeriod(gtld='ubs', delegation_date='1985-01-01', removal_date=''),
    'ug': GTLDPeriod(gtld='ug', delegation_date='1985-01-01', removal_date=''),
    'uk': GTLDPeriod(gtld='uk', delegation_date='1985-01-01', removal_date=''),
    'unicom': GTLDPeriod(gtld='unicom', delegation_date='1985-01-01', removal_date=''),
    'university': GTLDPeriod(gtld='university', delegation_date='1985-01-01', removal_date=''),
    'uno': GTLDPeriod(gtld='uno', delegation_date='1985-01-01', removal_date=''),
    'uol': GTLDPeriod(gtld='uol', delegation_date='1985-01-01', removal_date=''),
    'ups': GTLDPeriod(gtld='ups', delegation_date='1985-01-01', removal_date=''),
    'us': GTLDPeriod(gtld='us', delegation_date='1985-01-01', removal_date=''),
    'uy': GTLDPeriod(gtld='uy', delegation_date='1985-01-01', removal_date=''),
    'uz': GTLDPeriod(gtld='uz', delegation_date='1985-01-01', removal_date=''),
    'va': GTLDPeriod(gtld='va', delegation_date='1985-01-01', removal_date=''),
    'vacations': GTLDPeriod(gtld='vacations', delegation_date='1985-01-01', removal_date=''),
    'vana': GTLDPeriod(gtld='vana', delegation_date='1985-01-01', removal_date=''),
    'vanguard': GTLDPeriod(gtld='vanguard', delegation_date='1985-01-01', removal_date=''),
    'vc': GTLDPeriod(gtld='vc', delegation_date='1985-01-01', removal_date=''),
    've': GTLDPeriod(gtld='ve', delegation_date='1985-01-01', removal_date=''),
    'vegas': GTLDPeriod(gtld='vegas', delegation_date='1985-01-01', removal_date=''),
    'ventures': GTLDPeriod(gtld='ventures', delegation_date='1985-01-01', removal_date=''),
    'verisign': GTLDPeriod(gtld='verisign', delegation_date='1985-01-01', removal_date=''),
    'versicherung': GTLDPeriod(gtld='versicherung', delegation_date='1985-01-01', removal_date=''),
    'vet': GTLDPeriod(gtld='vet', delegation_date='1985-01-01', removal_date=''),
    'vg': GTLDPeriod(gtld='vg', delegation_date='1985-01-01', removal_date=''),
    'vi': GTLDPeriod(gtld='vi', delegation_date='1985-01-01', removal_date=''),
    'viajes': GTLDPeriod(gtld='viajes', delegation_date='1985-01-01', removal_date=''),
    'video': GTLDPeriod(gtld='video', delegation_date='1985-01-01', removal_date=''),
    'vig': GTLDPeriod(gtld='vig', delegation_date='1985-01-01', removal_date=''),
    'viking': GTLDPeriod(gtld='viking', delegation_date='1985-01-01', removal_date=''),
    'villas': GTLDPeriod(gtld='villas', delegation_date='1985-01-01', removal_date=''),
    'vin': GTLDPeriod(gtld='vin', delegation_date='1985-01-01', removal_date=''),
    'vip': GTLDPeriod(gtld='vip', delegation_date='1985-01-01', removal_date=''),
    'virgin': GTLDPeriod(gtld='virgin', delegation_date='1985-01-01', removal_date=''),
    'visa': GTLDPeriod(gtld='visa', delegation_date='1985-01-01', removal_date=''),
    'vision': GTLDPeriod(gtld='vision', delegation_date='1985-01-01', removal_date=''),
    'viva': GTLDPeriod(gtld='viva', delegation_date='1985-01-01', removal_date=''),
    'vivo': GTLDPeriod(gtld='vivo', delegation_date='1985-01-01', removal_date=''),
    'vlaanderen': GTLDPeriod(gtld='vlaanderen', delegation_date='1985-01-01', removal_date=''),
    'vn': GTLDPeriod(gtld='vn', delegation_date='1985-01-01', removal_date=''),
    'vodka': GTLDPeriod(gtld='vodka', delegation_date='1985-01-01', removal_date=''),
    'volkswagen': GTLDPeriod(gtld='volkswagen', delegation_date='1985-01-01', removal_date=''),
    'volvo': GTLDPeriod(gtld='volvo', delegation_date='1985-01-01', removal_date=''),
    'vote': GTLDPeriod(gtld='vote', delegation_date='1985-01-01', removal_date=''),
    'voting': GTLDPeriod(gtld='voting', delegation_date='1985-01-01', removal_date=''),
    'voto': GTLDPeriod(gtld='voto', delegation_date='1985-01-01', removal_date=''),
    'voyage': GTLDPeriod(gtld='voyage', delegation_date='1985-01-01', removal_date=''),
    'vu': GTLDPeriod(gtld='vu', delegation_date='1985-01-01', removal_date=''),
    'vuelos': GTLDPeriod(gtld='vuelos', delegation_date='1985-01-01', removal_date=''),
    'wales': GTLDPeriod(gtld='wales', delegation_date='1985-01-01', removal_date=''),
    'walmart': GTLDPeriod(gtld='walmart', delegation_date='1985-01-01', removal_date=''),
    'walter': GTLDPeriod(gtld='walter', delegation_date='1985-01-01', removal_date=''),
    'wang': GTLDPeriod(gtld='wang', delegation_date='1985-01-01', removal_date=''),
    'wanggou': GTLDPeriod(gtld='wanggou', delegation_date='1985-01-01', removal_date=''),
    'watch': GTLDPeriod(gtld='watch', delegation_date='1985-01-01', removal_date=''),
    'watches': GTLDPeriod(gtld='watches', delegation_date='1985-01-01', removal_date=''),
    'weather': GTLDPeriod(gtld='weather', delegation_date='1985-01-01', removal_date=''),
    'weatherchannel': GTLDPeriod(gtld='weatherchannel', delegation_date='1985-01-01', removal_date=''),
    'webcam': GTLDPeriod(gtld='webcam', delegation_date='1985-01-01', removal_date=''),
    'weber': GTLDPeriod(gtld='weber', delegation_date='1985-01-01', removal_date=''),
    'website': GTLDPeriod(gtld='website', delegation_date='1985-01-01', removal_date=''),
    'wedding': GTLDPeriod(gtld='wedding', delegation_date='1985-01-01', removal_date=''),
    'weibo': GTLDPeriod(gtld='weibo', delegation_date='1985-01-01', removal_date=''),
    'weir': GTLDPeriod(gtld='weir', delegation_date='1985-01-01', removal_date=''),
    'wf': GTLDPeriod(gtld='wf', delegation_date='1985-01-01', removal_date=''),
    'whoswho': GTLDPeriod(gtld='whoswho', delegation_date='1985-01-01', removal_date=''),
    'wien': GTLDPeriod(gtld='wien', delegation_date='1985-01-01', removal_date=''),
    'wiki': GTLDPeriod(gtld='wiki', delegation_date='1985-01-01', removal_date=''),
    'williamhill': GTLDPeriod(gtld='williamhill', delegation_date='1985-01-01', removal_date=''),
    'win': GTLDPeriod(gtld='win', delegation_date='1985-01-01', removal_date=''),
    'windows': GTLDPeriod(gtld='windows', delegation_date='1985-01-01', removal_date=''),
    'wine': GTLDPeriod(gtld='wine', delegation_date='1985-01-01', removal_date=''),
    'winners': GTLDPeriod(gtld='winners', delegation_date='1985-01-01', removal_date=''),
    'wme': GTLDPeriod(gtld='wme', delegation_date='1985-01-01', removal_date=''),
    'wolterskluwer': GTLDPeriod(gtld='wolterskluwer', delegation_date='1985-01-01', removal_date=''),
    'woodside': GTLDPeriod(gtld='woodside', delegation_date='1985-01-01', removal_date=''),
    'work': GTLDPeriod(gtld='work', delegation_date='1985-01-01', removal_date=''),
    'works': GTLDPeriod(gtld='works', delegation_date='1985-01-01', removal_date=''),
    'world': GTLDPeriod(gtld='world', delegation_date='1985-01-01', removal_date=''),
    'wow': GTLDPeriod(gtld='wow', delegation_date='1985-01-01', removal_date=''),
    'ws': GTLDPeriod(gtld='ws', delegation_date='1985-01-01', removal_date=''),
    'wtc': GTLDPeriod(gtld='wtc', delegation_date='1985-01-01', removal_date=''),
    'wtf': GTLDPeriod(gtld='wtf', delegation_date='1985-01-01', removal_date=''),
    'xbox': GTLDPeriod(gtld='xbox', delegation_date='1985-01-01', removal_date=''),
    'xerox': GTLDPeriod(gtld='xerox', delegation_date='1985-01-01', removal_date=''),
    'xfinity': GTLDPeriod(gtld='xfinity', delegation_date='1985-01-01', removal_date=''),
    'xihuan': GTLDPeriod(gtld='xihuan', delegation_date='1985-01-01', removal_date=''),
    'xin': GTLDPeriod(gtld='xin', delegation_date='1985-01-01', removal_date=''),
    'xn--11b4c3d': GTLDPeriod(gtld='xn--11b4c3d', delegation_date='1985-01-01', removal_date=''),
    'xn--1ck2e1b': GTLDPeriod(gtld='xn--1ck2e1b', delegation_date='1985-01-01', removal_date=''),
    'xn--1qqw23a': GTLDPeriod(gtld='xn--1qqw23a', delegation_date='1985-01-01', removal_date=''),
    'xn--2scrj9c': GTLDPeriod(gtld='xn--2scrj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--30rr7y': GTLDPeriod(gtld='xn--30rr7y', delegation_date='1985-01-01', removal_date=''),
    'xn--3bst00m': GTLDPeriod(gtld='xn--3bst00m', delegation_date='1985-01-01', removal_date=''),
    'xn--3ds443g': GTLDPeriod(gtld='xn--3ds443g', delegation_date='1985-01-01', removal_date=''),
    'xn--3e0b707e': GTLDPeriod(gtld='xn--3e0b707e', delegation_date='1985-01-01', removal_date=''),
    'xn--3hcrj9c': GTLDPeriod(gtld='xn--3hcrj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--3pxu8k': GTLDPeriod(gtld='xn--3pxu8k', delegation_date='1985-01-01', removal_date=''),
    'xn--42c2d9a': GTLDPeriod(gtld='xn--42c2d9a', delegation_date='1985-01-01', removal_date=''),
    'xn--45br5cyl': GTLDPeriod(gtld='xn--45br5cyl', delegation_date='1985-01-01', removal_date=''),
    'xn--45brj9c': GTLDPeriod(gtld='xn--45brj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--45q11c': GTLDPeriod(gtld='xn--45q11c', delegation_date='1985-01-01', removal_date=''),
    'xn--4dbrk0ce': GTLDPeriod(gtld='xn--4dbrk0ce', delegation_date='1985-01-01', removal_date=''),
    'xn--4gbrim': GTLDPeriod(gtld='xn--4gbrim', delegation_date='1985-01-01', removal_date=''),
    'xn--54b7fta0cc': GTLDPeriod(gtld='xn--54b7fta0cc', delegation_date='1985-01-01', removal_date=''),
    'xn--55qw42g': GTLDPeriod(gtld='xn--55qw42g', delegation_date='1985-01-01', removal_date=''),
    'xn--55qx5d': GTLDPeriod(gtld='xn--55qx5d', delegation_date='1985-01-01', removal_date=''),
    'xn--5su34j936bgsg': GTLDPeriod(gtld='xn--5su34j936bgsg', delegation_date='1985-01-01', removal_date=''),
    'xn--5tzm5g': GTLDPeriod(gtld='xn--5tzm5g', delegation_date='1985-01-01', removal_date=''),
    'xn--6frz82g': GTLDPeriod(gtld='xn--6frz82g', delegation_date='1985-01-01', removal_date=''),
    'xn--6qq986b3xl': GTLDPeriod(gtld='xn--6qq986b3xl', delegation_date='1985-01-01', removal_date=''),
    'xn--80adxhks': GTLDPeriod(gtld='xn--80adxhks', delegation_date='1985-01-01', removal_date=''),
    'xn--80ao21a': GTLDPeriod(gtld='xn--80ao21a', delegation_date='1985-01-01', removal_date=''),
    'xn--80aqecdr1a': GTLDPeriod(gtld='xn--80aqecdr1a', delegation_date='1985-01-01', removal_date=''),
    'xn--80asehdb': GTLDPeriod(gtld='xn--80asehdb', delegation_date='1985-01-01', removal_date=''),
    'xn--80aswg': GTLDPeriod(gtld='xn--80aswg', delegation_date='1985-01-01', removal_date=''),
    'xn--8y0a063a': GTLDPeriod(gtld='xn--8y0a063a', delegation_date='1985-01-01', removal_date=''),
    'xn--90a3ac': GTLDPeriod(gtld='xn--90a3ac', delegation_date='1985-01-01', removal_date=''),
    'xn--90ae': GTLDPeriod(gtld='xn--90ae', delegation_date='1985-01-01', removal_date=''),
    'xn--90ais': GTLDPeriod(gtld='xn--90ais', delegation_date='1985-01-01', removal_date=''),
    'xn--9dbq2a': GTLDPeriod(gtld='xn--9dbq2a', delegation_date='1985-01-01', removal_date=''),
    'xn--9et52u': GTLDPeriod(gtld='xn--9et52u', delegation_date='1985-01-01', removal_date=''),
    'xn--9krt00a': GTLDPeriod(gtld='xn--9krt00a', delegation_date='1985-01-01', removal_date=''),
    'xn--b4w605ferd': GTLDPeriod(gtld='xn--b4w605ferd', delegation_date='1985-01-01', removal_date=''),
    'xn--bck1b9a5dre4c': GTLDPeriod(gtld='xn--bck1b9a5dre4c', delegation_date='1985-01-01', removal_date=''),
    'xn--c1avg': GTLDPeriod(gtld='xn--c1avg', delegation_date='1985-01-01', removal_date=''),
    'xn--c2br7g': GTLDPeriod(gtld='xn--c2br7g', delegation_date='1985-01-01', removal_date=''),
    'xn--cck2b3b': GTLDPeriod(gtld='xn--cck2b3b', delegation_date='1985-01-01', removal_date=''),
    'xn--cckwcxetd': GTLDPeriod(gtld='xn--cckwcxetd', delegation_date='1985-01-01', removal_date=''),
    'xn--cg4bki': GTLDPeriod(gtld='xn--cg4bki', delegation_date='1985-01-01', removal_date=''),
    'xn--clchc0ea0b2g2a9gcd': GTLDPeriod(gtld='xn--clchc0ea0b2g2a9gcd', delegation_date='1985-01-01', removal_date=''),
    'xn--czr694b': GTLDPeriod(gtld='xn--czr694b', delegation_date='1985-01-01', removal_date=''),
    'xn--czrs0t': GTLDPeriod(gtld='xn--czrs0t', delegation_date='1985-01-01', removal_date=''),
    'xn--czru2d': GTLDPeriod(gtld='xn--czru2d', delegation_date='1985-01-01', removal_date=''),
    'xn--d1acj3b': GTLDPeriod(gtld='xn--d1acj3b', delegation_date='1985-01-01', removal_date=''),
    'xn--d1alf': GTLDPeriod(gtld='xn--d1alf', delegation_date='1985-01-01', removal_date=''),
    'xn--e1a4c': GTLDPeriod(gtld='xn--e1a4c', delegation_date='1985-01-01', removal_date=''),
    'xn--eckvdtc9d': GTLDPeriod(gtld='xn--eckvdtc9d', delegation_date='1985-01-01', removal_date=''),
    'xn--efvy88h': GTLDPeriod(gtld='xn--efvy88h', delegation_date='1985-01-01', removal_date=''),
    'xn--fct429k': GTLDPeriod(gtld='xn--fct429k', delegation_date='1985-01-01', removal_date=''),
    'xn--fhbei': GTLDPeriod(gtld='xn--fhbei', delegation_date='1985-01-01', removal_date=''),
    'xn--fiq228c5hs': GTLDPeriod(gtld='xn--fiq228c5hs', delegation_date='1985-01-01', removal_date=''),
    'xn--fiq64b': GTLDPeriod(gtld='xn--fiq64b', delegation_date='1985-01-01', removal_date=''),
    'xn--fiqs8s': GTLDPeriod(gtld='xn--fiqs8s', delegation_date='1985-01-01', removal_date=''),
    'xn--fiqz9s': GTLDPeriod(gtld='xn--fiqz9s', delegation_date='1985-01-01', removal_date=''),
    'xn--fjq720a': GTLDPeriod(gtld='xn--fjq720a', delegation_date='1985-01-01', removal_date=''),
    'xn--flw351e': GTLDPeriod(gtld='xn--flw351e', delegation_date='1985-01-01', removal_date=''),
    'xn--fpcrj9c3d': GTLDPeriod(gtld='xn--fpcrj9c3d', delegation_date='1985-01-01', removal_date=''),
    'xn--fzc2c9e2c': GTLDPeriod(gtld='xn--fzc2c9e2c', delegation_date='1985-01-01', removal_date=''),
    'xn--fzys8d69uvgm': GTLDPeriod(gtld='xn--fzys8d69uvgm', delegation_date='1985-01-01', removal_date=''),
    'xn--g2xx48c': GTLDPeriod(gtld='xn--g2xx48c', delegation_date='1985-01-01', removal_date=''),
    'xn--gckr3f0f': GTLDPeriod(gtld='xn--gckr3f0f', delegation_date='1985-01-01', removal_date=''),
    'xn--gecrj9c': GTLDPeriod(gtld='xn--gecrj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--gk3at1e': GTLDPeriod(gtld='xn--gk3at1e', delegation_date='1985-01-01', removal_date=''),
    'xn--h2breg3eve': GTLDPeriod(gtld='xn--h2breg3eve', delegation_date='1985-01-01', removal_date=''),
    'xn--h2brj9c': GTLDPeriod(gtld='xn--h2brj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--h2brj9c8c': GTLDPeriod(gtld='xn--h2brj9c8c', delegation_date='1985-01-01', removal_date=''),
    'xn--hxt814e': GTLDPeriod(gtld='xn--hxt814e', delegation_date='1985-01-01', removal_date=''),
    'xn--i1b6b1a6a2e': GTLDPeriod(gtld='xn--i1b6b1a6a2e', delegation_date='1985-01-01', removal_date=''),
    'xn--imr513n': GTLDPeriod(gtld='xn--imr513n', delegation_date='1985-01-01', removal_date=''),
    'xn--io0a7i': GTLDPeriod(gtld='xn--io0a7i', delegation_date='1985-01-01', removal_date=''),
    'xn--j1aef': GTLDPeriod(gtld='xn--j1aef', delegation_date='1985-01-01', removal_date=''),
    'xn--j1amh': GTLDPeriod(gtld='xn--j1amh', delegation_date='1985-01-01', removal_date=''),
    'xn--j6w193g': GTLDPeriod(gtld='xn--j6w193g', delegation_date='1985-01-01', removal_date=''),
    'xn--jlq480n2rg': GTLDPeriod(gtld='xn--jlq480n2rg', delegation_date='1985-01-01', removal_date=''),
    'xn--jvr189m': GTLDPeriod(gtld='xn--jvr189m', delegation_date='1985-01-01', removal_date=''),
    'xn--kcrx77d1x4a': GTLDPeriod(gtld='xn--kcrx77d1x4a', delegation_date='1985-01-01', removal_date=''),
    'xn--kprw13d': GTLDPeriod(gtld='xn--kprw13d', delegation_date='1985-01-01', removal_date=''),
    'xn--kpry57d': GTLDPeriod(gtld='xn--kpry57d', delegation_date='1985-01-01', removal_date=''),
    'xn--kput3i': GTLDPeriod(gtld='xn--kput3i', delegation_date='1985-01-01', removal_date=''),
    'xn--l1acc': GTLDPeriod(gtld='xn--l1acc', delegation_date='1985-01-01', removal_date=''),
    'xn--lgbbat1ad8j': GTLDPeriod(gtld='xn--lgbbat1ad8j', delegation_date='1985-01-01', removal_date=''),
    'xn--mgb2ddes': GTLDPeriod(gtld='xn--mgb2ddes', delegation_date='1985-01-01', removal_date=''),
    'xn--mgb9awbf': GTLDPeriod(gtld='xn--mgb9awbf', delegation_date='1985-01-01', removal_date=''),
    'xn--mgba3a3ejt': GTLDPeriod(gtld='xn--mgba3a3ejt', delegation_date='1985-01-01', removal_date=''),
    'xn--mgba3a4f16a': GTLDPeriod(gtld='xn--mgba3a4f16a', delegation_date='1985-01-01', removal_date=''),
    'xn--mgba3a4fra': GTLDPeriod(gtld='xn--mgba3a4fra', delegation_date='1985-01-01', removal_date=''),
    'xn--mgba7c0bbn0a': GTLDPeriod(gtld='xn--mgba7c0bbn0a', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbaakc7dvf': GTLDPeriod(gtld='xn--mgbaakc7dvf', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbaam7a8h': GTLDPeriod(gtld='xn--mgbaam7a8h', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbab2bd': GTLDPeriod(gtld='xn--mgbab2bd', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbah1a3hjkrd': GTLDPeriod(gtld='xn--mgbah1a3hjkrd', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbai9a5eva00b': GTLDPeriod(gtld='xn--mgbai9a5eva00b', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbai9azgqp6j': GTLDPeriod(gtld='xn--mgbai9azgqp6j', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbayh7gpa': GTLDPeriod(gtld='xn--mgbayh7gpa', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbbh1a': GTLDPeriod(gtld='xn--mgbbh1a', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbbh1a71e': GTLDPeriod(gtld='xn--mgbbh1a71e', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbc0a9azcg': GTLDPeriod(gtld='xn--mgbc0a9azcg', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbca7dzdo': GTLDPeriod(gtld='xn--mgbca7dzdo', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbcpq6gpa1a': GTLDPeriod(gtld='xn--mgbcpq6gpa1a', delegation_date='1985-01-01', removal_date=''),
    'xn--mgberp4a5d4a87g': GTLDPeriod(gtld='xn--mgberp4a5d4a87g', delegation_date='1985-01-01', removal_date=''),
    'xn--mgberp4a5d4ar': GTLDPeriod(gtld='xn--mgberp4a5d4ar', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbgu82a': GTLDPeriod(gtld='xn--mgbgu82a', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbi4ecexp': GTLDPeriod(gtld='xn--mgbi4ecexp', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbpl2fh': GTLDPeriod(gtld='xn--mgbpl2fh', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbqly7c0a67fbc': GTLDPeriod(gtld='xn--mgbqly7c0a67fbc', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbqly7cvafr': GTLDPeriod(gtld='xn--mgbqly7cvafr', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbt3dhd': GTLDPeriod(gtld='xn--mgbt3dhd', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbtf8fl': GTLDPeriod(gtld='xn--mgbtf8fl', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbtx2b': GTLDPeriod(gtld='xn--mgbtx2b', delegation_date='1985-01-01', removal_date=''),
    'xn--mgbx4cd0ab': GTLDPeriod(gtld='xn--mgbx4cd0ab', delegation_date='1985-01-01', removal_date=''),
    'xn--mix082f': GTLDPeriod(gtld='xn--mix082f', delegation_date='1985-01-01', removal_date=''),
    'xn--mix891f': GTLDPeriod(gtld='xn--mix891f', delegation_date='1985-01-01', removal_date=''),
    'xn--mk1bu44c': GTLDPeriod(gtld='xn--mk1bu44c', delegation_date='1985-01-01', removal_date=''),
    'xn--mxtq1m': GTLDPeriod(gtld='xn--mxtq1m', delegation_date='1985-01-01', removal_date=''),
    'xn--ngbc5azd': GTLDPeriod(gtld='xn--ngbc5azd', delegation_date='1985-01-01', removal_date=''),
    'xn--ngbe9e0a': GTLDPeriod(gtld='xn--ngbe9e0a', delegation_date='1985-01-01', removal_date=''),
    'xn--ngbrx': GTLDPeriod(gtld='xn--ngbrx', delegation_date='1985-01-01', removal_date=''),
    'xn--nnx388a': GTLDPeriod(gtld='xn--nnx388a', delegation_date='1985-01-01', removal_date=''),
    'xn--node': GTLDPeriod(gtld='xn--node', delegation_date='1985-01-01', removal_date=''),
    'xn--nqv7f': GTLDPeriod(gtld='xn--nqv7f', delegation_date='1985-01-01', removal_date=''),
    'xn--nqv7fs00ema': GTLDPeriod(gtld='xn--nqv7fs00ema', delegation_date='1985-01-01', removal_date=''),
    'xn--nyqy26a': GTLDPeriod(gtld='xn--nyqy26a', delegation_date='1985-01-01', removal_date=''),
    'xn--o3cw4h': GTLDPeriod(gtld='xn--o3cw4h', delegation_date='1985-01-01', removal_date=''),
    'xn--ogbpf8fl': GTLDPeriod(gtld='xn--ogbpf8fl', delegation_date='1985-01-01', removal_date=''),
    'xn--otu796d': GTLDPeriod(gtld='xn--otu796d', delegation_date='1985-01-01', removal_date=''),
    'xn--p1acf': GTLDPeriod(gtld='xn--p1acf', delegation_date='1985-01-01', removal_date=''),
    'xn--p1ai': GTLDPeriod(gtld='xn--p1ai', delegation_date='1985-01-01', removal_date=''),
    'xn--pgbs0dh': GTLDPeriod(gtld='xn--pgbs0dh', delegation_date='1985-01-01', removal_date=''),
    'xn--pssy2u': GTLDPeriod(gtld='xn--pssy2u', delegation_date='1985-01-01', removal_date=''),
    'xn--q7ce6a': GTLDPeriod(gtld='xn--q7ce6a', delegation_date='1985-01-01', removal_date=''),
    'xn--q9jyb4c': GTLDPeriod(gtld='xn--q9jyb4c', delegation_date='1985-01-01', removal_date=''),
    'xn--qcka1pmc': GTLDPeriod(gtld='xn--qcka1pmc', delegation_date='1985-01-01', removal_date=''),
    'xn--qxa6a': GTLDPeriod(gtld='xn--qxa6a', delegation_date='1985-01-01', removal_date=''),
    'xn--qxam': GTLDPeriod(gtld='xn--qxam', delegation_date='1985-01-01', removal_date=''),
    'xn--rhqv96g': GTLDPeriod(gtld='xn--rhqv96g', delegation_date='1985-01-01', removal_date=''),
    'xn--rovu88b': GTLDPeriod(gtld='xn--rovu88b', delegation_date='1985-01-01', removal_date=''),
    'xn--rvc1e0am3e': GTLDPeriod(gtld='xn--rvc1e0am3e', delegation_date='1985-01-01', removal_date=''),
    'xn--s9brj9c': GTLDPeriod(gtld='xn--s9brj9c', delegation_date='1985-01-01', removal_date=''),
    'xn--ses554g': GTLDPeriod(gtld='xn--ses554g', delegation_date='1985-01-01', removal_date=''),
    'xn--t60b56a': GTLDPeriod(gtld='xn--t60b56a', delegation_date='1985-01-01', removal_date=''),
    'xn--tckwe': GTLDPeriod(gtld='xn--tckwe', delegation_date='1985-01-01', removal_date=''),
    'xn--tiq49xqyj': GTLDPeriod(gtld='xn--tiq49xqyj', delegation_date='1985-01-01', removal_date=''),
    'xn--unup4y': GTLDPeriod(gtld='xn--unup4y', delegation_date='1985-01-01', removal_date=''),
    'xn--vermgensberater-ctb': GTLDPeriod(gtld='xn--vermgensberater-ctb', delegation_date='1985-01-01', removal_date=''),
    'xn--vermgensberatung-pwb': GTLDPeriod(gtld='xn--vermgensberatung-pwb', delegation_date='1985-01-01', removal_date=''),
    'xn--vhquv': GTLDPeriod(gtld='xn--vhquv', delegation_date='1985-01-01', removal_date=''),
    'xn--vuq861b': GTLDPeriod(gtld='xn--vuq861b', delegation_date='1985-01-01', removal_date=''),
    'xn--w4r85el8fhu5dnra': GTLDPeriod(gtld='xn--w4r85el8fhu5dnra', delegation_date='1985-01-01', removal_date=''),
    'xn--w4rs40l': GTLDPeriod(gtld='xn--w4rs40l', delegation_date='1985-01-01', removal_date=''),
    'xn--wgbh1c': GTLDPeriod(gtld='xn--wgbh1c', delegation_date='1985-01-01', removal_date=''),
    'xn--wgbl6a': GTLDPeriod(gtld='xn--wgbl6a', delegation_date='1985-01-01', removal_date=''),
    'xn--xhq521b': GTLDPeriod(gtld='xn--xhq521b', delegation_date='1985-01-01', removal_date=''),
    'xn--xkc2al3hye2a': GTLDPeriod(gtld='xn--xkc2al3hye2a', delegation_date='1985-01-01', removal_date=''),
    'xn--xkc2dl3a5ee0h': GTLDPeriod(gtld='xn--xkc2dl3a5ee0h', delegation_date='1985-01-01', removal_date=''),
    'xn--y9a3aq': GTLDPeriod(gtld='xn--y9a3aq', delegation_date='1985-01-01', removal_date=''),
    'xn--yfro4i67o': GTLDPeriod(gtld='xn--yfro4i67o', delegation_date='1985-01-01', removal_date=''),
    'xn--ygbi2ammx': GTLDPeriod(gtld='xn--ygbi2ammx', delegation_date='1985-01-01', removal_date=''),
    'xn--zfr164b': GTLDPeriod(gtld='xn--zfr164b', delegation_date='1985-01-01', removal_date=''),
    'xxx': GTLDPeriod(gtld='xxx', delegation_date='1985-01-01', removal_date=''),
    'xyz': GTLDPeriod(gtld='xyz', delegation_date='1985-01-01', removal_date=''),
    'yachts': GTLDPeriod(gtld='yachts', delegation_date='1985-01-01', removal_date=''),
    'yahoo': GTLDPeriod(gtld='yahoo', delegation_date='1985-01-01', removal_date=''),
    'yamaxun': GTLDPeriod(gtld='yamaxun', delegation_date='1985-01-01', removal_date=''),
    'yandex': GTLDPeriod(gtld='yandex', delegation_date='1985-01-01', removal_date=''),
    'ye': GTLDPeriod(gtld='ye', delegation_date='1985-01-01', removal_date=''),
    'yodobashi': GTLDPeriod(gtld='yodobashi', delegation_date='1985-01-01', removal_date=''),
    'yoga': GTLDPeriod(gtld='yoga', delegation_date='1985-01-01', removal_date=''),
    'yokohama': GTLDPeriod(gtld='yokohama', delegation_date='1985-01-01', removal_date=''),
    'you': GTLDPeriod(gtld='you', delegation_date='1985-01-01', removal_date=''),
    'youtube': GTLDPeriod(gtld='youtube', delegation_date='1985-01-01', removal_date=''),
    'yt': GTLDPeriod(gtld='yt', delegation_date='1985-01-01', removal_date=''),
    'yun': GTLDPeriod(gtld='yun', delegation_date='1985-01-01', removal_date=''),
    'zappos': GTLDPeriod(gtld='zappos', delegation_date='1985-01-01', removal_date=''),
    'zara': GTLDPeriod(gtld='zara', delegation_date='1985-01-01', removal_date=''),
    'zero': GTLDPeriod(gtld='zero', delegation_date='1985-01-01', removal_date=''),
    'zip': GTLDPeriod(gtld='zip', delegation_date='1985-01-01', removal_date=''),
    'zm': GTLDPeriod(gtld='zm', delegation_date='1985-01-01', removal_date=''),
    'zone': GTLDPeriod(gtld='zone', delegation_date='1985-01-01', removal_date=''),
    'zuerich': GTLDPeriod(gtld='zuerich', delegation_date='1985-01-01', removal_date=''),
    'zw': GTLDPeriod(gtld='zw', delegation_date='1985-01-01', removal_date=''),
    # .onion is a special case and not a general gTLD. It is allowed in some
    # circumstances in the web PKI, so it is included with the date of the
    # CABF ballot permitting EV issuance for .onion names:
    # https://cabforum.org/2015/02/18/ballot-144-validation-rules-dot-onion-names/
    'onion': GTLDPeriod(gtld='onion', delegation_date='2015-02-18', removal_date=''),
}
