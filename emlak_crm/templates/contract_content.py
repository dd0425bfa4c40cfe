"""
Fixed text of the standard Turkish residential rental contract.

GENERAL_TERMS are printed on page 2 ("GENEL ŞARTLAR"), SPECIAL_TERMS on
pages 3-4 ("ÖZEL ŞARTLAR") and EVICTION_UNDERTAKING_TEXT on page 5.
"""

GENERAL_TERMS = [
    "Kiracı kiraladığı taşınmazı, kendi malı gibi iyi bir şekilde kullanmaya, evsaf ve meziyetlerini kaybetmesine meydan vermemeye ve içinde oturanlar varsa onlara karşı iyi davranmaya mecburdur.",
    "Kiralanan taşınmaz kiracı tarafından, üçüncü şahsa kısmen veya tamamen kiralanıp da taksimatı ve ciheti tahsisi değiştirilir veya herhangi bir suretle tahrip ve tadil edilirse, kiraya veren kira akdini bozabileceği gibi bu yüzden vukua gelecek zarar ve ziyanı, protesto çekmeye ve hüküm almaya hacet olmaksızın, kiracıdan talep edebilir. Kiracı ilgili zararı ödemekle yükümlüdür. Vaki zararın üçüncü şahıs tarafından yapılmış olması kiraya verenin, sözleşmede ismi yazılı kiracıdan talep hakkını etkilemez.",
    "Kiralanan taşınmazın tamiri lazım gelir ve üçüncü bir şahıs onun üzerinde bir hak iddia ederse, kiracı hemen kiraya verene haber vermeye mecburdur. Haber vermezse zarardan mesul olacaktır. Kiracı zaruri tamiratın icrasına müsaade etmeye mecburdur. Kiralanan taşınmazın alelade kullanılması için menteşelemek, cam taktırmak, reze koymak, kilit ve sürgü yerleştirmek, badana yapmak gibi ufak tefek kusurlar, kiraya verene haber vermeden ve münasip müddet beklenmeden kiracı tarafından yaptırılırsa söz konusu işlemlere ilişkin masraflar kiraya verenden istenemez.",
    "Kiralanan taşınmazın vergi ve tamir masrafları kiraya verene, kullanması için lazım gelen temizleme ve ıslah masrafları kiracıya aittir. Bu hususta âdete bakılır.",
    "Kiracı, kiraladığı taşınmazı ne halde buldu ise kiraya verene o halde teslim etmeye mecburdur. Bu hususta yerel adete de bakılabilir.",
    "Kiracı, kiralanan gayrimenkul içinde bulunan demirbaş, eşya ve edevatın kontrat müddetinin bitiminde tamamını iadeyle mükelleftir. Gerek bu eşya gerekse kiralanan şeyin teferruatı ve mütemmim cüzleri zayi edilir veya mutat üzere kullanılmaktan mütevellit noksandan ziyade kıymetlerine noksan arız olursa, kiracı bunları kıymetleriyle tazmine veyahut kiraya veren istediği takdirde, eski haline getirmeye mecburdur.",
    "Kiracı, kiraladığı taşınmazı kontrata göre kullanmış olması nedeniyle taşınmazda veya içinde bulunan eşyada meydana gelen eksiklik ve değişiklikten mesul olmayacaktır. Kiracının kiraladığı şeyi iyi halde almış olması ve iyi bir şekilde kullanmış olması asıldır.",
    "Kiracı, kontrat müddetinin son ayı içerisinde kiralanan taşınmazı görmek için gelen taliplerin gezip görmesine ve kiralanacak yerin vasıflarını tetkik etmesine karşı koyamaz.",
    "Kira müddeti bittiği halde kiralanan taşınmazı boşaltmadığı surette kiracı, kiraya verenin bundan doğacak zarar ve ziyanını tazmin edecektir.",
    "Kiracı, kendisi veyahut birlikte yaşadığı kimselerin sıhhati için ciddi tehlike teşkil edecek mahiyette bulunmayan hususlar nedeniyle kira akdini bozamaz, taşınmazı tesellümden imtina edemez veya kira bedelinin tenzilini talep edemez.",
    "Kiracının kiralanan taşınmazın içinde ve dışında yaptıracağı tezyinat masrafları tamamen kendisine ait olacaktır. Mukavele müddeti bittiğinde hiçbir güne bedel, masraf ve tazminat istemeye hakkı olmamak üzere gayrimenkul inşaatın tamamı, kiraya verenin olacaktır.",
    "Kontrata ilişkin damga vergisi, kontrat bedel ve harçları, belediye ve noter dairelerine kiracı tarafından ödenecektir.",
    "Bu sözleşmede yazılı bulunmayan hükümlere ihtiyaç duyulduğunda 6098 sayılı Borçlar Kanunu, 4721 sayılı Medeni Kanun, 488 sayılı Damga Vergisi Kanunu, 634 sayılı Kat Mülkiyeti Kanunu ve diğer yürürlükteki ilgili Kanun ve Yargıtay kararları uygulanır.",
]

SPECIAL_TERMS = [
    "Ön sayfadaki 12 maddelik yasal hükümleri taraflar peşinen kabul etmişler ve ek Özel Şartlar maddeleri de birlikte belirleyerek imzalamışlardır. Kiracı, kiralanan taşınmazı bir başkasına devredemez. Kısmen veya tamamen, geçici veya sürekli olarak üçüncü bir şahsa veya kuruluşa devredemez, faydalandıramaz. Taşınmaz yalnızca Kiracının kullanıma açıktır ve hiçbir şekilde kullanım amacı dışında kullanamaz. Kiracı, kullanım amacına aykırılığın veya taşınmazın devir halinin kesin olarak akdin feshi ve tahliye nedeni olacağın şimdiden kabul ve taahhüt eder.",
    "Kira sözleşmesi süresince taşınmazda, eklenti ve demirbaşlarda meydana gelebilecek her türlü hasar ve arızalar, kiraya verene bildirilip, onay alındıktan sonra; kiracı tarafından giderilecek olup, bu hususlardan dolayı hiçbir nam ve miktarda kiraya verenden talep ve rücuda bulunulamaz. Kiracı, taşınmaz ile birlikte teslim aldığı eklenti, teçhizat ve demirbaş niteliğindeki tüm eşyaların periyodik bakımını yaptırmakla yükümlü olup, tahliye anında bu eşyaların bakımı yapılmış, temiz ve çalışır halde, hasarsız teslim etmekle yükümlüdür. Bu işlemler için yapılacak harcamalar kiracıya aittir.",
    "Taşınmazda, kiraya verenin yazılı onayı olmadıkça hiçbir tadilat, yenilik ve değişiklik yapılamaz. Kiracı, onay sonrası taşınmazda yapacağı sabit ve taşınabilir değişiklikler, eklentiler ve sair dekorasyon için kiraya verenden hiçbir masraf ve bedel talep edemez. Aksine bir yazılı anlaşma yoksa kiracı, yenilik ve değişiklikler nedeniyle taşınmazda ortaya çıkabilecek değer artışının karşılığını isteyemez. Kiraya verene haber verilmeden yapılmış olan dekorasyon ve eklentiler dahi bu hükmün kapsamında olup, izinsiz eklenti ve tadilat nedeniyle kiraya verenin dava açma hakkı saklıdır.",
    "Kira sözleşmesinin feshi veya taşınmazın tahliyesinde, kiracının yaptığı taşınabilir eklenti ve/veya teçhizat dışındaki sabit değişiklik veya dekorasyon taşınmazda kalmalıdır. Kiraya veren, bu sabit değişiklikleri istemediği takdirde veya aksine bir anlaşma yoksa taşınmazı teslim tarihindeki eski haline getirilmesini kiracıdan isteyebilir. Kiraya verenin bu hakkı saklıdır. Taşınmazın teslim anındaki fotoğrafları işbu sözleşme ekindedir(Ek1).",
    "Taşınmazın sağlam, temiz ve kiraya uygun şekilde teslimi gerekli olup, teslim anındaki ayıplardan kiraya veren sorumludur. Kiracı, kiraya verenden taşınmazdaki varsa ayıbın uygun bir sürede giderilmesini isteyebilir; bu sürede ayıp giderilmezse kiracı, ayıbı kiraya veren hesabına giderebilir ve bundan doğan alacağını kira bedelinden indirebilir. Ancak kiracı, kendisinin gidermekle yükümlü olmadığı ayıpları kiraya verene gecikmeksizin bildirmekle yükümlüdür; aksi takdirde bundan doğan zarardan sorumludur. Kiracı, bakım ve ayıpların giderilmesi ve zararların önlenmesine yönelik çalışmalara katlanmakla yükümlüdür. Ayıbın, taşınmazın öngörülen kullanıma elverişliliğini ortadan kaldırması ya da önemli ölçüde engellemesi ve verilen sürede giderilmemesi hâlinde kiracı, sözleşmeyi feshedebilir. Ayrıca, yeniden inşaat, güçlendirme veya onarım sebepleri ile taşınmazın kullanımı imkânsız ise kiraya veren tahliye hakkını kullanabilir.",
    "Kiracı, taşınmazı sözleşmeye uygun olarak özenle kullanmak ve yakın çevrede oturan kişiler ile komşulara gerekli saygıyı göstermekle yükümlüdür. Kiracının bu yükümlülüğüne aykırı davranması durumu (Kiracının gürültü yapması, taşınmazı özensiz kullanma ve zarar vermesi) tahliye nedeni olacaktır. Bu durumda, kiraya veren en az otuz (30) gün süre vererek aykırılığın giderilmesi aksi takdirde sözleşmeyi feshedeceği konusunda yazılı bir ihtarda bulunacaktır.",
    "Kiracının taşınmaza kasten ağır bir zarar vermesi, kiracıya verilecek sürenin yararsız olacağının anlaşılması veya kiracının bu yükümlülüğe aykırı davranışının kiraya veren ile komşular bakımından çekilmez olması durumlarında kiraya veren, yazılı bir bildirimle sözleşmeyi hemen feshedebilir. Kiracı, Apartman ve/veya Site yönetiminin alacağı kararlara aynen uyacak olup, komşuluk kurallarına uygun geçinmeyi taahhüt etmiş ve aykırı davranışların da sözleşmeye uymamak olduğunu kabul etmiş, sonucunda doğacak sorumlulukları üstlenmiştir.",
    "Kiracı, kiralanan taşınmazın Elektrik, Su ve Doğalgaz giderleri, Çevre temizlik Vergisi ile taşınmazın ortak giderlerini (aidat, kapıcı, yakıt masrafı, asansör bakım-onarım, temizlik ve yönetici giderleri gibi) ödemeyi kabul ve taahhüt etmiştir. Sözleşme tarihinden önceki elektrik, su, doğalgaz, aidat gibi borçlar kiraya veren tarafından ödenecek ve taşınmaz Kiracıya borçsuz olarak teslim edilecektir.",
    "Kiracı elektrik, su ve doğalgaz aboneliğini kendi adına alacaktır.",
    "Kira sözleşmesi bir (1) yıllık olup, sözleşmenin sona ermesinden en az 30 (otuz) gün evvel yazılı olarak sözleşmenin feshi ihbarında bulunulmadığı takdirde sözleşme yenilenmiş kabul edilir. Bu durumda Kiracı aylık kira bedeline hiçbir uyarı ve bildirime gerek kalmadan yıllık Enflasyon (TUİK'in açıkladığı 12 aylık ortalama TÜFE) artışı oranında zam yapıp yeni kira bedelini ödemeyi şimdiden kabul ve taahhüt etmiştir. Diğer yıllar için aynı usul ve şartlar geçerlidir.",
    "Kiracının kira bedelini ve/veya 8.maddede belirtilen yan giderleri süresi içinde ödememesi halinde, kiraya veren, kiracıya 30 gün içinde borcun ödenmesini bildiren ihtarname gönderir. Bu ihtara rağmen borç ödenmez ise taşınmazın tahliyesi ve sözleşmenin feshi hakkını kullanabilir. Aynı şekilde bir kira dönemi içinde kiraya veren, kira bedelinin ödenmemesi nedeniyle, iki (2) defa haklı şekilde ihtar göndermişse kira dönemi sonunda tahliye hakkı oluşacaktır. Ve bu haller, Kiracı tarafından taşınmazın tahliyesi sebebi olarak peşinen kabul ve taahhüt edilmiştir. Geciken aylık ödemelere uygulanacak faiz oranı aylık %5 dir.",
    "Kiralanan taşınmaz kira süresi bitiminde bir tutanakla kiraya verene tam bir temizlik içinde, teslim aldığı şekilde ve borçsuz olarak teslim edilecektir.",
    "Kiracının sözleşme dönemi içinde (sözleşme süresine veya fesih dönemine uymaksızın) taşınmazı tahliye etme durumu ortaya çıkarsa, kira sözleşmesinden doğan borçları, taşınmazın benzer koşullarla kiraya verilebileceği makul bir süre için devam eder. Kiraya verene en az 30 gün önceden durumu yazılı olarak bildirmek ve mutabık kalmak durumundadır. Aksi takdirde, kiraya veren sözleşme dönem sonuna kadar olan kira bedellerini talep etme hakkına sahiptir. Bu durumda Kiracı tahliye tarihinden 30 gün öncesinden itibaren kiralanan taşınmazı görmek için gelen taliplerin görmesine karşı koyamaz. 488 sayılı Damga Vergisi açısından, Mesken niteliği dışındaki taşınmazda veya tarafların birinin tüzel veya ticaretle uğraşan kişi olması durumunda Damga vergisi doğar. Kira sözleşme süresi, süre uzama şekli, nüsha sayısı, kefil ve kefalet şekli ve Maliye'nin yıllık tebliğlerindeki oranlara (2024 için binde 1,89 kefalette binde 9,48 ilave) göre her iki tarafa bölünerek, Damga Vergisi beyanı 15 gün içinde verilir ve ödenir.",
    "Kira sözleşmesindeki adresler tarafların kanuni tebligat adresi olup, adres değişikliği taraflara yazılı olarak bildirilmediği takdirde yazılı yapılan tebligat geçerlidir ve tebliğ edilmiş addolunur.",
    "Sözleşme koşullarına uyulmaması veya ihtilaf halinde İstanbul (Çağlayan) Mahkemeleri ve İcra Daireleri yetkilidir.",
    "Kira sözleşmesi süresi dolmadan çıkan kiracıya depozito iadesi yapılmayacaktır.",
    "İki ay üst üste kira bedelinin ödenmemesi halinde diğer ayların kira bedelleri muaccel olacaktır.",
    "Kiralanan taşınmaz kira süresi bitiminde bir tutanakla kiraya verene tam bir temizlik içinde, teslim aldığı şekilde ve borçsuz olarak teslim edilecektir.",
    "İşbu sözleşme 13 Genel ve 19 maddelik Özel Şartlardan oluşmakta olup, tarafların mutabakatı ile düzenlenmiştir.",
]

# Zero-based index of the renewal clause that receives the payment instructions
PAYMENT_CLAUSE_INDEX = 9

PAYMENT_CLAUSE_SUFFIX = (
    " Kiracı, aylık kira bedellerini her ayın {payment_day}'inde peşin olarak "
    "{iban} numaralı IBAN Hesabına {owner_name} adına yatıracaktır."
)

EVICTION_UNDERTAKING_TEXT = (
    "Halihazırda kiracısı bulunduğum sözleşmede yazılı adresteki taşınmazı hiçbir ihtar ve ihbara "
    "gerek kalmadan kayıtsız ve şartsız olarak 6098 sayılı Türk Borçlar Kanunu uyarınca yukarıda "
    "belirtmiş olduğum tarihte tahliye edeceğimi boş ve sağlam bir halde kiraya verene teslim "
    "edeceğimi ayrıca tahliyeyi geçirmemden ötürü mal sahibinin icrai takip başlatması halinde bu "
    "amaçla yapacağı masrafları yoksun kaldığı karı veya uğradığı zararı ödeyeceğimi beyan ve "
    "taahhüt ederim."
)

CPI_INCREASE_NOTE = "YILLIK ARTIŞ TÜFE (Tüketici Fiyat Endeksi) ORANINDA OLACAKTIR"
